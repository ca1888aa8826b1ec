"""
Math helpers для complexplane

Численные примитивы, общие для доменных типов.
"""

from complexplane.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    all_finite,
    is_close,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Checks
    "all_finite",
    "is_close",
]
