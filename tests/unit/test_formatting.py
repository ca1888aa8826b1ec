"""
Тесты форматирования комплексных чисел

Проверяет:
1. Все строки таблицы решений
2. Регрессию знака для imaginary из (-1, 0)
3. ComplexFormatConfig: точность, мнимая единица, валидация
"""

import math

import pytest

from complexplane.domain import (
    DEFAULT_FORMAT_CONFIG,
    IMAGINARY_UNIT,
    Complex,
    ComplexFormatConfig,
    format_complex,
)


# =============================================================================
# ТАБЛИЦА РЕШЕНИЙ
# =============================================================================


class TestDisplayTable:
    """Тесты вывода по таблице решений"""

    @pytest.mark.parametrize(
        "z,expected",
        [
            # Чисто вещественные
            (Complex(0, 0), "0.00"),
            (Complex(2, 0), "2.00"),
            (Complex(-3.456, 0), "-3.46"),
            # Чисто мнимые
            (Complex(0, 1), "𝒊"),
            (Complex(0, -1), "-𝒊"),
            (Complex(0, 2.5), "2.50𝒊"),
            (Complex(0, -2.5), "-2.50𝒊"),
            (Complex(0, -0.5), "-0.50𝒊"),
            # Общий случай
            (Complex(2, 1), "2.00 + 𝒊"),
            (Complex(2, -1), "2.00 - 𝒊"),
            (Complex(2, 3), "2.00 + 3.00𝒊"),
            (Complex(-2, -3), "-2.00 - 3.00𝒊"),
            (Complex(1.5, 0.25), "1.50 + 0.25𝒊"),
        ],
    )
    def test_table_rows(self, z: Complex, expected: str) -> None:
        assert str(z) == expected
        assert format_complex(z) == expected

    def test_negative_fraction_imaginary_sign_regression(self) -> None:
        """imaginary из (-1, 0): ровно один знак минус"""
        assert str(Complex(2, -0.5)) == "2.00 - 0.50𝒊"

    def test_negative_zero_imaginary_is_real(self) -> None:
        """-0.0 в мнимой части трактуется как 0"""
        assert str(Complex(2, -0.0)) == "2.00"

    def test_unit_rendered_only_for_exact_one(self) -> None:
        """Значения, округляемые до 1.00, но не равные 1, выводятся с модулем"""
        assert str(Complex(0, 0.999)) == "1.00𝒊"
        assert str(Complex(2, -1.001)) == "2.00 - 1.00𝒊"

    def test_nan_imaginary_not_negative(self) -> None:
        """NaN не отрицателен, поэтому выводится со знаком плюс"""
        assert str(Complex(1, math.nan)) == "1.00 + nan𝒊"

    def test_repr_is_structural(self) -> None:
        """repr не использует таблицу"""
        assert repr(Complex(2, -0.5)) == "Complex(real=2.0, imaginary=-0.5)"

    def test_default_unit_is_mathematical_italic_i(self) -> None:
        assert IMAGINARY_UNIT == "\U0001d48a"


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


class TestComplexFormatConfig:
    """Тесты ComplexFormatConfig"""

    def test_defaults(self) -> None:
        assert DEFAULT_FORMAT_CONFIG.decimals == 2
        assert DEFAULT_FORMAT_CONFIG.imaginary_unit == "𝒊"

    def test_custom_decimals(self) -> None:
        config = ComplexFormatConfig(decimals=4)
        assert format_complex(Complex(2, -0.5), config) == "2.0000 - 0.5000𝒊"

    def test_zero_decimals(self) -> None:
        config = ComplexFormatConfig(decimals=0)
        assert format_complex(Complex(2, 3), config) == "2 + 3𝒊"

    def test_custom_unit(self) -> None:
        config = ComplexFormatConfig(imaginary_unit="j")
        assert format_complex(Complex(0, -1), config) == "-j"
        assert format_complex(Complex(1, 2), config) == "1.00 + 2.00j"

    def test_negative_decimals_rejected(self) -> None:
        with pytest.raises(ValueError, match="decimals"):
            ComplexFormatConfig(decimals=-1)

    def test_empty_unit_rejected(self) -> None:
        with pytest.raises(ValueError, match="imaginary_unit"):
            ComplexFormatConfig(imaginary_unit="")

    def test_config_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_FORMAT_CONFIG.decimals = 3  # type: ignore[misc]
