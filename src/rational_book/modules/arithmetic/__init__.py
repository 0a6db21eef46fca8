# src/rational_book/modules/arithmetic/__init__.py
"""
Módulo de Aritmética de Fracciones.
"""

from __future__ import annotations

# Application
from .application.use_cases import add, construct, parse, sum_rationals, to_text

# Domain
from .domain.exceptions import InvalidArgument, RationalArithmeticError
from .domain.value_objects import RationalNumber

# Infrastructure
from .infrastructure.observability import ObservabilityService, configure_logging

__all__ = [
    "RationalNumber",
    "RationalArithmeticError",
    "InvalidArgument",
    "construct",
    "add",
    "to_text",
    "sum_rationals",
    "parse",
    "ObservabilityService",
    "configure_logging",
]
