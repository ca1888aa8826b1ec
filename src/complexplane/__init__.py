"""
Complex-plane value types: complex numbers and axis-aligned rectangles.

Foundational numeric primitives for graphics/fractal/math code.
"""

from complexplane.domain import (
    DEFAULT_FORMAT_CONFIG,
    I,
    IMAGINARY_UNIT,
    ZERO,
    Complex,
    ComplexDivisionByZero,
    ComplexFormatConfig,
    ComplexRect,
    MutableComplexRect,
    format_complex,
    modulus,
    modulus_squared,
    normalize_corners,
    sqr,
)

__all__ = [
    "Complex",
    "ComplexDivisionByZero",
    "ComplexFormatConfig",
    "ComplexRect",
    "DEFAULT_FORMAT_CONFIG",
    "I",
    "IMAGINARY_UNIT",
    "MutableComplexRect",
    "ZERO",
    "format_complex",
    "modulus",
    "modulus_squared",
    "normalize_corners",
    "sqr",
]
