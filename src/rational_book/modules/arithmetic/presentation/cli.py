# src/rational_book/modules/arithmetic/presentation/cli.py
"""
Interfaz de Línea de Comandos (CLI) para Aritmética de Fracciones.

Arquitectura: Presentation Layer (Interface Adapter)
Responsabilidad:
    1. Parsear argumentos (argv).
    2. Configurar observabilidad.
    3. Formatear la salida (JSON/Texto).
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from rational_book.modules.arithmetic.application.use_cases import (
    parse,
    sum_rationals,
    to_text,
)
from rational_book.modules.arithmetic.domain.exceptions import RationalArithmeticError
from rational_book.modules.arithmetic.domain.value_objects import RationalNumber
from rational_book.modules.arithmetic.infrastructure.observability import (
    LOG_FILE_ENV,
    configure_logging,
)


def setup_parser() -> argparse.ArgumentParser:
    """Configura los argumentos aceptados por la herramienta."""
    parser = argparse.ArgumentParser(
        prog="rational-book",
        description="🧮 Rational Book - Suma exacta de fracciones",
        epilog="Ejemplo: rational-book 1/2 1/3 --json  (negativos tras '--': rational-book -- -1/2 1/4)",
    )

    parser.add_argument(
        "terms", nargs="+", help="Fracciones a sumar, en formato n/d o n"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Salida en formato JSON (útil para tuberías/pipes)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Muestra logs estructurados de cada operación",
    )

    return parser


def format_output_text(terms: List[RationalNumber], total: RationalNumber):
    """Presentación amigable para humanos."""
    print("=" * 40)
    print(f"{'#':<4} | {'TÉRMINO':<15}")
    print("-" * 40)
    for i, term in enumerate(terms, 1):
        print(f"{i:<4} | {to_text(term):<15}")
    print("=" * 40)
    print(f"Suma: {to_text(total)}")


def format_output_json(terms: List[RationalNumber], total: RationalNumber):
    """Presentación para máquinas (Machine Readable)."""
    data = {
        "terms": [
            {"numerator": t.numerator, "denominator": t.denominator, "text": to_text(t)}
            for t in terms
        ],
        "sum": {
            "numerator": total.numerator,
            "denominator": total.denominator,
            "text": to_text(total),
        },
    }
    print(json.dumps(data, indent=2, ensure_ascii=False))


def main(argv: Optional[List[str]] = None):
    parser = setup_parser()
    args = parser.parse_args(argv)

    configure_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=os.getenv(LOG_FILE_ENV),
    )

    try:
        terms = [parse(raw) for raw in args.terms]
        total = sum_rationals(terms)

        if args.json:
            format_output_json(terms, total)
        else:
            format_output_text(terms, total)

    except RationalArithmeticError as e:
        print(f"❌ Error Aritmético: {e}", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        print("\n⚠️  Operación cancelada por el usuario.", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"❌ Error Crítico: {e}", file=sys.stderr)
        sys.exit(3)


if __name__ == "__main__":
    main()
