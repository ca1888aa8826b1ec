"""
Complex — Модель комплексного числа

Immutable Pydantic модель (frozen=True): пара (real, imaginary) с арифметикой,
точным равенством, хешированием, модулем, сопряжением и форматированием.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение неизменяемо после создания (безопасно разделять между потоками)
2. Равенство точное (без epsilon); hash согласован с равенством
3. Деление на (0, 0) → ComplexDivisionByZero, никогда не NaN/Inf
4. NaN/Inf во входных значениях допустимы и распространяются по IEEE-754
5. Смешанные операции с вещественным числом определены только слева:
   x + z, x - z, x * z, x / z. Формы z + x и т.д. дают TypeError

ФОРМУЛЫ:
    (a+bi)(c+di) = (ac - bd) + (ad + bc)i
    (a+bi)/(c+di) = ((ac + bd) + (bc - ad)i) / (c² + d²)
    |z| = hypot(a, b)
"""

import logging
import math
from typing import Final

from pydantic import BaseModel, Field, field_validator

from complexplane.domain.formatting import format_complex
from complexplane.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    all_finite,
    is_close,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ComplexDivisionByZero(ZeroDivisionError):
    """
    Деление на комплексный ноль: c² + d² == 0.

    Нарушение контракта вызывающей стороны. Делитель должен проверяться
    до вызова; результат NaN/Inf вместо исключения недопустим.
    """

    def __init__(self, dividend: "Complex | float") -> None:
        self.dividend = dividend
        super().__init__(f"Division by zero complex number (dividend: {dividend})")


def _is_real(value: object) -> bool:
    # bool формально int, но как операнд арифметики не принимается
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _checked_denominator(dividend: "Complex | float", divisor: "Complex") -> float:
    """
    Знаменатель деления c² + d² с проверкой на точный ноль.

    Raises:
        ComplexDivisionByZero: если c² + d² == 0
    """
    denom = divisor.modulus_squared
    if denom == 0:
        logger.debug("Rejected division of %r by zero complex divisor %r", dividend, divisor)
        raise ComplexDivisionByZero(dividend)
    return denom


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число real + imaginary·i.

    Создание: Complex(real, imaginary) позиционно или по именам;
    Complex() == Complex(0, 0).

    Immutable модель (frozen=True). Все операции возвращают новый экземпляр.
    """

    real: float = Field(default=0.0, description="Вещественная часть")
    imaginary: float = Field(default=0.0, description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, real: float = 0.0, imaginary: float = 0.0) -> None:
        super().__init__(real=real, imaginary=imaginary)

    @field_validator("real", "imaginary", mode="before")
    @classmethod
    def validate_real_component(cls, v: object) -> float:
        """
        Компонента должна быть вещественным числом (int или float).

        Строки и bool не приводятся: "1.5" отклоняется, а не читается как 1.5.
        """
        if not _is_real(v):
            raise ValueError(f"component must be a real number, got {type(v).__name__}")
        return float(v)  # type: ignore[arg-type]

    # ---------- равенство и хеш ----------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.real == other.real and self.imaginary == other.imaginary

    def __hash__(self) -> int:
        return hash((self.real, self.imaginary))

    # ---------- модуль ----------

    @property
    def modulus_squared(self) -> float:
        """real² + imaginary² (дешевле modulus, если достаточно квадрата)."""
        return self.real * self.real + self.imaginary * self.imaginary

    @property
    def modulus(self) -> float:
        """
        Модуль |z|.

        Использует math.hypot: не переполняется для больших компонент
        (например, 1e200) и не теряет точность для малых.
        """
        return math.hypot(self.real, self.imaginary)

    @property
    def magnitude(self) -> float:
        return self.modulus

    def __abs__(self) -> float:
        return self.modulus

    # ---------- производные значения ----------

    @property
    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imaginary)

    def squared(self) -> "Complex":
        return self * self

    @property
    def is_finite(self) -> bool:
        """Обе компоненты конечны (не NaN, не Inf)."""
        return all_finite(self.real, self.imaginary)

    def is_close(
        self,
        other: "Complex",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Приближённое сравнение по обеим компонентам.

        Оператор == остаётся точным; этот метод предназначен для проверки
        результатов вычислений с накопленной погрешностью.

        Args:
            other: Второе комплексное число
            rel_tol: Относительная толерантность
            abs_tol: Абсолютная толерантность

        Returns:
            True если обе компоненты близки
        """
        return is_close(self.real, other.real, rel_tol, abs_tol) and is_close(
            self.imaginary, other.imaginary, rel_tol, abs_tol
        )

    # ---------- арифметика Complex op Complex ----------

    def __add__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def __sub__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def __neg__(self) -> "Complex":
        return Complex(-self.real, -self.imaginary)

    def __mul__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(
            self.real * other.real - self.imaginary * other.imaginary,
            self.real * other.imaginary + other.real * self.imaginary,
        )

    def __truediv__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        denom = _checked_denominator(self, other)
        return Complex(
            (self.real * other.real + self.imaginary * other.imaginary) / denom,
            (self.imaginary * other.real - self.real * other.imaginary) / denom,
        )

    # ---------- арифметика float op Complex (только слева) ----------

    def __radd__(self, other: float) -> "Complex":
        if not _is_real(other):
            return NotImplemented
        return Complex(other + self.real, self.imaginary)

    def __rsub__(self, other: float) -> "Complex":
        if not _is_real(other):
            return NotImplemented
        return Complex(other - self.real, -self.imaginary)

    def __rmul__(self, other: float) -> "Complex":
        if not _is_real(other):
            return NotImplemented
        return Complex(other * self.real, other * self.imaginary)

    def __rtruediv__(self, other: float) -> "Complex":
        # x / (a+bi) = x(a-bi) / (a² + b²)
        if not _is_real(other):
            return NotImplemented
        denom = _checked_denominator(other, self)
        return Complex((other * self.real) / denom, (-other * self.imaginary) / denom)

    # ---------- вывод ----------

    def __str__(self) -> str:
        return format_complex(self)


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO: Final[Complex] = Complex(0.0, 0.0)
I: Final[Complex] = Complex(0.0, 1.0)


# =============================================================================
# FREE FUNCTIONS
# =============================================================================
# Тонкие обёртки над членами Complex для старого кода, вызывающего
# modulus(z) вместо z.modulus. Каноническая форма — члены модели.


def modulus(z: Complex) -> float:
    return z.modulus


def modulus_squared(z: Complex) -> float:
    return z.modulus_squared


def sqr(z: Complex) -> Complex:
    return z.squared()
