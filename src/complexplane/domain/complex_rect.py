"""
ComplexRect — Прямоугольная область комплексной плоскости

Прямоугольник со сторонами, параллельными осям, задан двумя каноническими
углами. Используется как окно просмотра для фрактальной/графической графики.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. top_left.real <= bottom_right.real
2. top_left.imaginary >= bottom_right.imaginary
3. bottom_left и top_right вычисляются из канонической пары и не хранятся
4. ComplexRect неизменяем (frozen=True) и безопасен для разделения между потоками
5. MutableComplexRect нормализует пару углов при каждом присваивании,
   до возврата управления. Синхронизация при конкурентной мутации
   из нескольких потоков — ответственность вызывающей стороны

НОРМАЛИЗАЦИЯ:
    top_left     = (min(c1.real, c2.real), max(c1.imaginary, c2.imaginary))
    bottom_right = (max(c1.real, c2.real), min(c1.imaginary, c2.imaginary))
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, model_validator

from complexplane.domain.complex_number import Complex

logger = logging.getLogger(__name__)


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalize_corners(c1: Complex, c2: Complex) -> tuple[Complex, Complex]:
    """
    Приведение двух произвольных точек к канонической паре углов.

    Порядок аргументов не важен. Операция идемпотентна: повторная
    нормализация результата возвращает тот же результат.

    Args:
        c1: Первая точка
        c2: Вторая точка

    Returns:
        (top_left, bottom_right)

    Raises:
        TypeError: Если хотя бы одна точка не Complex

    Examples:
        >>> normalize_corners(Complex(1, -1), Complex(-2, 1))
        (Complex(real=-2.0, imaginary=1.0), Complex(real=1.0, imaginary=-1.0))
    """
    if not isinstance(c1, Complex) or not isinstance(c2, Complex):
        raise TypeError(
            f"Corners must be Complex, got {type(c1).__name__} and {type(c2).__name__}"
        )

    top_left = Complex(min(c1.real, c2.real), max(c1.imaginary, c2.imaginary))
    bottom_right = Complex(max(c1.real, c2.real), min(c1.imaginary, c2.imaginary))

    if top_left != c1 or bottom_right != c2:
        logger.debug(
            "Normalized corners %r, %r to top_left=%r, bottom_right=%r",
            c1,
            c2,
            top_left,
            bottom_right,
        )

    return top_left, bottom_right


# =============================================================================
# BASE RECT
# =============================================================================


class _CornerRect(BaseModel):
    """
    Общая часть обоих вариантов прямоугольника.

    Нормализация выполняется model_validator'ом, поэтому действует для всех
    путей создания через валидацию: ComplexRect(c1, c2),
    ComplexRect(top_left=..., bottom_right=...), model_validate(...) и
    model_copy(update=...). model_construct() валидацию пропускает и для
    прямоугольников не поддерживается.
    """

    top_left: Complex = Field(..., description="Угол с min real и max imaginary")
    bottom_right: Complex = Field(..., description="Угол с max real и min imaginary")

    def __init__(
        self, c1: Complex | None = None, c2: Complex | None = None, /, **data: Any
    ) -> None:
        if c1 is not None or c2 is not None:
            data.update(top_left=c1, bottom_right=c2)
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def normalize_input_corners(cls, data: Any) -> Any:
        """Приведение входных углов к канонической паре."""
        if not isinstance(data, dict) or "top_left" not in data or "bottom_right" not in data:
            return data

        top_left, bottom_right = normalize_corners(
            Complex.model_validate(data["top_left"]),
            Complex.model_validate(data["bottom_right"]),
        )
        return {**data, "top_left": top_left, "bottom_right": bottom_right}

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> "_CornerRect":
        """Копия с заменой углов; результат проходит ту же нормализацию."""
        copied = super().model_copy(update=update, deep=deep)
        return type(self)(copied.top_left, copied.bottom_right)

    @property
    def bottom_left(self) -> Complex:
        return Complex(self.top_left.real, self.bottom_right.imaginary)

    @property
    def top_right(self) -> Complex:
        return Complex(self.bottom_right.real, self.top_left.imaginary)

    @property
    def width(self) -> float:
        return self.bottom_right.real - self.top_left.real

    @property
    def height(self) -> float:
        return self.top_left.imaginary - self.bottom_right.imaginary

    def __str__(self) -> str:
        return (
            f"tl:{self.top_left}, br:{self.bottom_right}, "
            f"bl:{self.bottom_left}, tr:{self.top_right}"
        )


# =============================================================================
# IMMUTABLE RECT
# =============================================================================


class ComplexRect(_CornerRect):
    """
    Неизменяемый прямоугольник комплексной плоскости.

    Создание из любых двух точек: ComplexRect(c1, c2). Углы нормализуются,
    поэтому ComplexRect(a, b) == ComplexRect(b, a).
    """

    model_config = {"frozen": True}  # Immutable

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexRect):
            return NotImplemented
        return self.top_left == other.top_left and self.bottom_right == other.bottom_right

    def __hash__(self) -> int:
        return hash((self.top_left, self.bottom_right))

    def to_mutable(self) -> "MutableComplexRect":
        """Изменяемая копия с теми же углами."""
        return MutableComplexRect(self.top_left, self.bottom_right)


# =============================================================================
# MUTABLE RECT
# =============================================================================


class MutableComplexRect(_CornerRect):
    """
    Изменяемый прямоугольник комплексной плоскости.

    Углы меняются через set_top_left / set_bottom_right / set_corners либо
    обычным присваиванием rect.top_left = z (маршрутизируется в те же
    сеттеры). Каждая мутация нормализует пару по текущим значениям обоих
    углов и заменяет оба поля одним шагом.

    Не потокобезопасен: тип не содержит блокировок.
    Изменяемый, поэтому не хешируется.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MutableComplexRect):
            return NotImplemented
        return self.top_left == other.top_left and self.bottom_right == other.bottom_right

    __hash__ = None  # type: ignore[assignment]

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "top_left":
            self.set_top_left(value)
        elif name == "bottom_right":
            self.set_bottom_right(value)
        else:
            super().__setattr__(name, value)

    def set_corners(self, c1: Complex, c2: Complex) -> None:
        """
        Замена обоих углов с нормализацией.

        Raises:
            TypeError: Если хотя бы одна точка не Complex
        """
        top_left, bottom_right = normalize_corners(c1, c2)
        # Одно обновление __dict__: промежуточное состояние с одним новым углом не видно
        self.__dict__.update(top_left=top_left, bottom_right=bottom_right)

    def set_top_left(self, value: Complex) -> None:
        self.set_corners(value, self.bottom_right)

    def set_bottom_right(self, value: Complex) -> None:
        self.set_corners(self.top_left, value)

    def freeze(self) -> ComplexRect:
        """Неизменяемый снапшот текущих углов."""
        return ComplexRect(self.top_left, self.bottom_right)
