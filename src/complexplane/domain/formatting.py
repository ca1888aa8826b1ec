"""
Formatting — Человекочитаемое представление комплексных чисел

Формат используется в логах и отладочном выводе, поэтому является
де-факто контрактом: вывод должен совпадать символ в символ.

ТАБЛИЦА РЕШЕНИЙ (r = real, m = |imaginary|, u = мнимая единица):
    imaginary == 0               -> r
    real == 0, imaginary == 1    -> u
    real == 0, imaginary == -1   -> -u
    real == 0, иначе             -> mu  / -mu
    real != 0, imaginary == 1    -> r + u
    real != 0, imaginary == -1   -> r - u
    real != 0, иначе             -> r + mu / r - mu

Знак мнимой части выводится ровно один раз: для imaginary из (-1, 0)
результат "2.00 - 0.50𝒊", а не "2.00 + -0.50𝒊".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from complexplane.domain.complex_number import Complex


# =============================================================================
# CONSTANTS
# =============================================================================

# Математическая курсивная i (U+1D48A)
IMAGINARY_UNIT: Final[str] = "𝒊"

DEFAULT_DECIMALS: Final[int] = 2


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ComplexFormatConfig:
    """Конфигурация вывода комплексных чисел.

    Значения по умолчанию дают канонический формат (2 знака, 𝒊).
    """

    decimals: int = DEFAULT_DECIMALS
    imaginary_unit: str = IMAGINARY_UNIT

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {self.decimals}")
        if not self.imaginary_unit:
            raise ValueError("imaginary_unit cannot be empty")


DEFAULT_FORMAT_CONFIG: Final[ComplexFormatConfig] = ComplexFormatConfig()


# =============================================================================
# FORMATTING
# =============================================================================


def format_complex(z: Complex, config: ComplexFormatConfig | None = None) -> str:
    """
    Форматирование комплексного числа по таблице решений модуля.

    Args:
        z: Комплексное число
        config: Конфигурация формата (опционально, используется default)

    Returns:
        Строковое представление

    Examples:
        >>> format_complex(Complex(0, 0))
        '0.00'
        >>> format_complex(Complex(0, -1))
        '-𝒊'
        >>> format_complex(Complex(2, -0.5))
        '2.00 - 0.50𝒊'
    """
    config = config or DEFAULT_FORMAT_CONFIG
    unit = config.imaginary_unit

    r = f"{z.real:.{config.decimals}f}"
    mag_i = f"{abs(z.imaginary):.{config.decimals}f}"

    # Чисто вещественное
    if z.imaginary == 0:
        return r

    # Чисто мнимое
    if z.real == 0:
        if z.imaginary == 1:
            return unit
        if z.imaginary == -1:
            return f"-{unit}"
        return f"-{mag_i}{unit}" if z.imaginary < 0 else f"{mag_i}{unit}"

    # Общий случай
    if z.imaginary == 1:
        return f"{r} + {unit}"
    if z.imaginary == -1:
        return f"{r} - {unit}"
    return f"{r} - {mag_i}{unit}" if z.imaginary < 0 else f"{r} + {mag_i}{unit}"
