"""
Config — Параметры точности и округления

Конфигурация передаётся явно (frozen dataclass), глобального изменяемого
состояния нет. Значения по умолчанию:
- DEFAULT_DIVISION_PRECISION = 20 дробных цифр
- RoundingMode.HALF_UP для последней сохранённой цифры
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество дробных цифр частного по умолчанию
DEFAULT_DIVISION_PRECISION: Final[int] = 20

# Диапазон from_i32
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1


# =============================================================================
# ТИПЫ
# =============================================================================


class RoundingMode(str, Enum):
    """
    Режим округления последней сохранённой цифры.

    Применяется к модулю (magnitude), знак сохраняется:
    - HALF_UP: половина округляется от нуля (2.5 → 3, -2.5 → -3)
    - HALF_EVEN: банковское округление (2.5 → 2, 3.5 → 4)
    - DOWN: отбрасывание к нулю (2.9 → 2, -2.9 → -2)
    """

    HALF_UP = "HALF_UP"
    HALF_EVEN = "HALF_EVEN"
    DOWN = "DOWN"


@dataclass(frozen=True)
class DivisionConfig:
    """
    Политика деления (и отрицательных степеней).

    Attributes:
        precision: Максимум дробных цифр частного (>= 0)
        rounding: Режим округления последней цифры
    """

    precision: int = DEFAULT_DIVISION_PRECISION
    rounding: RoundingMode = RoundingMode.HALF_UP

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError(f"precision must be an int, got {type(self.precision).__name__}")
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")
        if not isinstance(self.rounding, RoundingMode):
            raise TypeError(f"rounding must be a RoundingMode, got {self.rounding!r}")


DEFAULT_DIVISION_CONFIG: Final[DivisionConfig] = DivisionConfig()


def resolve_division_config(
    config: DivisionConfig | None = None,
    precision: int | None = None,
    rounding: RoundingMode | None = None,
) -> DivisionConfig:
    """
    Сборка итоговой политики деления из базовой конфигурации и overrides.

    Args:
        config: Базовая конфигурация (default: DEFAULT_DIVISION_CONFIG)
        precision: Переопределение precision (optional)
        rounding: Переопределение rounding (optional)

    Returns:
        DivisionConfig с применёнными overrides

    Examples:
        >>> resolve_division_config(precision=5)
        DivisionConfig(precision=5, rounding=<RoundingMode.HALF_UP: 'HALF_UP'>)
    """
    base = config if config is not None else DEFAULT_DIVISION_CONFIG

    if precision is None and rounding is None:
        return base

    return DivisionConfig(
        precision=base.precision if precision is None else precision,
        rounding=base.rounding if rounding is None else rounding,
    )
