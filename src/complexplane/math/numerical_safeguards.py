"""
Numerical Safeguards — Float Comparison Primitives

Проверки float для доменных типов complexplane:
- Конечность набора компонент (ни одной NaN/Inf)
- Приближённое сравнение с относительной и абсолютной толерантностью

ВАЖНО: доменные типы НЕ санитизируют NaN/Inf. Значения распространяются
по правилам IEEE-754; эти функции лишь позволяют вызывающему коду
проверить результат.
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для приближённых сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для приближённых сравнений (около нуля)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def all_finite(*components: float) -> bool:
    """
    Все компоненты конечны.

    Для пустого набора возвращает True.

    Examples:
        >>> all_finite(1.0, -2.5)
        True
        >>> all_finite(1.0, float('nan'))
        False
    """
    return all(math.isfinite(c) for c in components)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Приближённое равенство двух float.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки. NaN не близок ничему

    Raises:
        ValueError: Если толерантность отрицательная, NaN или Inf

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(0.0, 1e-13)
        True
    """
    for name, tol in (("rel_tol", rel_tol), ("abs_tol", abs_tol)):
        if not (math.isfinite(tol) and tol >= 0):
            raise ValueError(f"{name} must be a finite non-negative tolerance, got {tol}")

    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
