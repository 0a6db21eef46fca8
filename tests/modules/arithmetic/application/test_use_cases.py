# tests/modules/arithmetic/application/test_use_cases.py
"""
Tests para: construct / add / to_text / sum_rationals / parse (Use Cases)
Tipo: Unitario (Application)
"""
import json
import sys
from unittest.mock import patch

import pytest

from rational_book.modules.arithmetic.application.use_cases import (
    add,
    construct,
    parse,
    sum_rationals,
    to_text,
)
from rational_book.modules.arithmetic.domain.exceptions import InvalidArgument
from rational_book.modules.arithmetic.domain.value_objects import RationalNumber

LOGGER_PATH = "rational_book.modules.arithmetic.infrastructure.observability.logger"

# === Escenarios concretos ===


@pytest.mark.parametrize(
    "n, d, expected",
    [
        (4, 8, "1/2"),
        (-3, 9, "-1/3"),
        (3, -9, "-1/3"),
        (0, 5, "0/1"),
    ],
)
def test_construct_and_to_text(n, d, expected):
    assert to_text(construct(n, d)) == expected


def test_construct_zero_denominator_fails():
    """
    Given: Denominador cero
    When: Se ejecuta construct
    Then: Lanza InvalidArgument (sin resultado parcial)
    """
    with pytest.raises(InvalidArgument):
        construct(5, 0)


def test_add_scenarios():
    assert to_text(add(construct(1, 2), construct(1, 3))) == "5/6"
    assert to_text(add(construct(1, 2), construct(1, 2))) == "1/1"


def test_add_identity_and_commutativity():
    a = construct(-7, 12)
    b = construct(5, 18)

    assert add(a, construct(0, 1)) == a
    assert add(a, b) == add(b, a)


# === sum_rationals ===


def test_sum_rationals_folds_terms():
    terms = [construct(1, 2), construct(1, 3), construct(1, 6)]

    assert sum_rationals(terms) == RationalNumber(1, 1)


def test_sum_rationals_accepts_generators():
    total = sum_rationals(construct(1, 2**k) for k in range(1, 5))

    assert to_text(total) == "15/16"


def test_sum_rationals_empty_is_zero():
    assert to_text(sum_rationals([])) == "0/1"


# === parse ===


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3/4", "3/4"),
        ("6/8", "3/4"),
        (" -2 / 6 ", "-1/3"),
        ("2/-6", "-1/3"),
        ("+5", "5/1"),
        ("0", "0/1"),
    ],
)
def test_parse_valid_text(text, expected):
    assert to_text(parse(text)) == expected


@pytest.mark.parametrize("text", ["", "abc", "1/", "/2", "1.5/2", "1/2/3"])
def test_parse_rejects_malformed_text(text):
    with pytest.raises(InvalidArgument) as exc_info:
        parse(text)

    assert "inválido" in str(exc_info.value)


def test_parse_rejects_zero_denominator():
    with pytest.raises(InvalidArgument) as exc_info:
        parse("1/0")

    assert "denominator must not be zero" in str(exc_info.value)


# === Instrumentación ===


@patch(LOGGER_PATH)
def test_add_logs_started_and_completed(mock_logger):
    """
    Given: Una suma válida
    When: Se ejecuta add
    Then: Se emiten eventos started/completed con el primer operando como target
    """
    # Act
    add(RationalNumber(1, 2), RationalNumber(1, 3))

    # Assert
    events = [json.loads(c[0][0]) for c in mock_logger.info.call_args_list]
    assert [e["event"] for e in events] == [
        "add_rationals.started",
        "add_rationals.completed",
    ]
    assert events[-1]["data"]["target"] == "1/2"
    assert events[-1]["data"]["status"] == "success"
    mock_logger.error.assert_not_called()


@patch(LOGGER_PATH)
def test_construct_failure_is_logged_and_reraised(mock_logger):
    """
    Given: Denominador cero
    When: Se ejecuta construct
    Then: Se loguea construct_rational.failed como WARNING (precondición
          del caller, no fallo del sistema) y la excepción se propaga
    """
    with pytest.raises(InvalidArgument):
        construct(1, 0)

    mock_logger.error.assert_not_called()
    mock_logger.warning.assert_called_once()
    log_json = json.loads(mock_logger.warning.call_args[0][0])
    assert log_json["event"] == "construct_rational.failed"
    assert log_json["data"]["error_type"] == "InvalidArgument"
    assert log_json["data"]["target"] == "unknown"


# === Límite de dígitos de int() (Python 3.11+) ===

needs_digit_limit = pytest.mark.skipif(
    getattr(sys, "get_int_max_str_digits", lambda: 0)() == 0,
    reason="El intérprete no limita la conversión int <-> str",
)


@needs_digit_limit
@pytest.mark.parametrize("text", ["1" * 5000, "1/" + "7" * 5000])
def test_parse_oversized_term_raises_invalid_argument(text):
    """
    Given: Un término con más dígitos de los que int() acepta
    When: Se ejecuta parse
    Then: Lanza InvalidArgument (no un ValueError genérico)
    """
    with pytest.raises(InvalidArgument) as exc_info:
        parse(text)

    assert "demasiado grande" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ValueError)


@needs_digit_limit
@patch(LOGGER_PATH)
def test_add_with_huge_operand_still_succeeds(mock_logger):
    """El texto del target no cabe en str(), pero la suma no se interrumpe."""
    huge = RationalNumber(10**5000, 1)

    result = add(huge, RationalNumber(1, 1))

    assert result.numerator == 10**5000 + 1
    log_json = json.loads(mock_logger.info.call_args_list[-1][0][0])
    assert log_json["data"]["target"] == "<demasiado grande>"
