"""
Domain models and value objects.

Contains the complex-plane value types: Complex, ComplexRect, MutableComplexRect.
"""

from complexplane.domain.complex_number import (
    I,
    ZERO,
    Complex,
    ComplexDivisionByZero,
    modulus,
    modulus_squared,
    sqr,
)
from complexplane.domain.complex_rect import (
    ComplexRect,
    MutableComplexRect,
    normalize_corners,
)
from complexplane.domain.formatting import (
    DEFAULT_FORMAT_CONFIG,
    IMAGINARY_UNIT,
    ComplexFormatConfig,
    format_complex,
)

__all__ = [
    # Complex model
    "Complex",
    "ComplexDivisionByZero",
    "I",
    "ZERO",
    "modulus",
    "modulus_squared",
    "sqr",
    # Rect models
    "ComplexRect",
    "MutableComplexRect",
    "normalize_corners",
    # Formatting
    "DEFAULT_FORMAT_CONFIG",
    "IMAGINARY_UNIT",
    "ComplexFormatConfig",
    "format_complex",
]
