# src/rational_book/modules/arithmetic/application/use_cases.py
"""
Casos de Uso para la Aritmética de Fracciones.

Arquitectura: Application Layer
Responsabilidad: Exponer la API pública (construir, sumar, formatear, parsear)
instrumentada con observabilidad. La lógica vive en el Value Object.
"""
from __future__ import annotations

import re
from typing import Iterable

from rational_book.modules.arithmetic.domain.exceptions import InvalidArgument
from rational_book.modules.arithmetic.domain.value_objects import RationalNumber
from rational_book.modules.arithmetic.infrastructure.observability import (
    ObservabilityService,
)

# "n/d" o solo "n"; espacios opcionales alrededor de la barra
_FRACTION_PATTERN = re.compile(r"^\s*([+-]?\d+)\s*(?:/\s*([+-]?\d+))?\s*$")


@ObservabilityService.measure_latency(operation_name="construct_rational")
def construct(numerator: int, denominator: int) -> RationalNumber:
    """
    Construye un racional en forma canónica.

    Raises:
        InvalidArgument: Si el denominador es cero.
        TypeError: Si alguno de los argumentos no es entero.
    """
    return RationalNumber(numerator, denominator)


@ObservabilityService.measure_latency(operation_name="add_rationals")
def add(a: RationalNumber, b: RationalNumber) -> RationalNumber:
    """Suma dos racionales. Los operandos no se modifican."""
    return a + b


def to_text(a: RationalNumber) -> str:
    return a.to_text()


@ObservabilityService.measure_latency(operation_name="sum_rationals")
def sum_rationals(terms: Iterable[RationalNumber]) -> RationalNumber:
    """
    Acumula una secuencia de racionales partiendo de 0/1.
    Una secuencia vacía devuelve 0/1.
    """
    total = RationalNumber(0, 1)
    for term in terms:
        total = total + term
    return total


@ObservabilityService.measure_latency(operation_name="parse_rational")
def parse(text: str) -> RationalNumber:
    """
    Interpreta textos como "3/4", "-2 / 6" o "5".

    Raises:
        InvalidArgument: Si el texto no tiene formato de fracción, el
            denominador es cero o algún término excede el límite de dígitos
            de int().
    """
    match = _FRACTION_PATTERN.match(text)
    if match is None:
        raise InvalidArgument(f"Formato de fracción inválido: {text!r}")

    numerator_text, denominator_text = match.groups()
    try:
        numerator = int(numerator_text)
        denominator = int(denominator_text) if denominator_text is not None else 1
    except ValueError as e:
        # Límite de dígitos de int() (sys.get_int_max_str_digits)
        raise InvalidArgument(f"Fracción demasiado grande para interpretar: {e}") from e
    return RationalNumber(numerator, denominator)
