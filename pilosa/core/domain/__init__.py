"""
Domain models and value objects.

Contains the BigNum value type.
"""

from pilosa.core.domain.big_num import BigNum, Sign

__all__ = [
    "BigNum",
    "Sign",
]
