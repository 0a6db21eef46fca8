# src/rational_book/modules/arithmetic/domain/value_objects.py
"""
RationalNumber Value Object.

Arquitectura: Modular Monolith
Componente: Value Object (Domain)
Responsabilidad: Representar una fracción exacta, validada, inmutable y
siempre en su forma canónica (términos mínimos).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from rational_book.core.number_theory import greatest_common_divisor
from rational_book.modules.arithmetic.domain.exceptions import InvalidArgument

# === 🧭 Protocolos Arquitectónicos ===
# ✅ CORE: Solo depende de core/ y de las excepciones del dominio.
# 🔒 Inmutabilidad: frozen=True.
# ❌ SIN LOGS: El dominio nunca loguea ni silencia errores.


def _require_integer(name: str, value: object) -> None:
    # bool es subclase de int; se excluye explícitamente
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"El {name} debe ser un entero, se recibió {type(value).__name__}"
        )


@dataclass(frozen=True)
class RationalNumber:
    """
    Representa un número racional n/d en forma canónica.

    Invariantes:
    1. denominator != 0
    2. gcd(|numerator|, |denominator|) == 1
    3. denominator > 0 (el signo siempre viaja en el numerador)

    La normalización ocurre una sola vez, al instanciar.
    """

    numerator: int
    denominator: int

    def __post_init__(self):
        """Validación de invariantes y reducción a términos mínimos."""
        _require_integer("numerador", self.numerator)
        _require_integer("denominador", self.denominator)

        if self.denominator == 0:
            raise InvalidArgument("denominator must not be zero")

        g = greatest_common_divisor(self.numerator, self.denominator)
        numerator = self.numerator // g
        denominator = self.denominator // g

        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        # frozen=True: única escritura permitida, durante la construcción
        object.__setattr__(self, "numerator", numerator)
        object.__setattr__(self, "denominator", denominator)

    def __add__(self, other: Union[RationalNumber, int]) -> RationalNumber:
        """
        Suma dos racionales (o un racional y un entero).

        (a/b) + (c/d) = (a*d + c*b) / (b*d), reconstruido por el mismo camino
        de validación y reducción que cualquier otra instancia.
        """
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, int):
            other = RationalNumber(other, 1)
        if not isinstance(other, RationalNumber):
            return NotImplemented

        return RationalNumber(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def __radd__(self, other: int) -> RationalNumber:
        return self.__add__(other)

    def to_text(self) -> str:
        """
        Representación 'numerador/denominador' con los valores canónicos.

        Raises:
            ValueError: Si alguna parte supera el límite de conversión int -> str
                del intérprete (sys.get_int_max_str_digits(), 4300 dígitos por
                defecto desde Python 3.11). El valor en sí sigue siendo válido.
        """
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.to_text()
