# rational-book/demo_rational.py
"""
Demo Interactiva: Números Racionales.

Arquitectura: Composition Root (Consumer)
Responsabilidad: Ejecutar los casos de uso y mostrar resultados por consola.
"""
import sys
from pathlib import Path

# === Configuración de Path para Imports ===
PROJECT_ROOT = Path(__file__).parent
sys.path.append(str(PROJECT_ROOT / "src"))

from rational_book.modules.arithmetic import (  # noqa: E402
    InvalidArgument,
    add,
    construct,
    sum_rationals,
    to_text,
)


def print_header(title: str):
    print(f"\n{'=' * 50}")
    print(f"🧮 {title}")
    print(f"{'=' * 50}")


def demo_construction():
    print_header("CONSTRUCCIÓN Y NORMALIZACIÓN")
    for n, d in [(4, 8), (-3, 9), (3, -9), (0, 5), (6, 3)]:
        print(f"   {n}/{d:<4} → {to_text(construct(n, d))}")


def demo_addition():
    print_header("SUMA (operador +)")
    half = construct(1, 2)
    third = construct(1, 3)
    print(f"   1/2 + 1/3 → {to_text(add(half, third))}")
    print(f"   1/2 + 1/2 → {to_text(half + half)}")
    print(f"   1/2 + 1   → {to_text(half + 1)}")
    series = sum_rationals(construct(1, 2**k) for k in range(1, 11))
    print(f"   Σ 1/2^k (k=1..10) → {to_text(series)}")


def demo_errors():
    print_header("PRECONDICIONES")
    try:
        construct(5, 0)
    except InvalidArgument as e:
        print(f"   ❌ 5/0 rechazado: {e}")


def main():
    demo_construction()
    demo_addition()
    demo_errors()


if __name__ == "__main__":
    main()
