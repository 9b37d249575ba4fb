"""
Core value type, arithmetic primitives, and invariants.

Everything here is pure in-process computation: no I/O, no global
mutable state.
"""
