#!/usr/bin/env python3
"""
Pipeline de CI Local para Rational Book.

Cada paso es (título, comando, bloqueante). Un paso bloqueante que falla
corta el pipeline con código 1; el resto solo deja advertencia.

Uso: python scripts/ci_pipeline.py
"""

import subprocess
import sys
import time
from datetime import datetime

GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
RESET = "\033[0m"

DOMAIN_PATHS = "src/rational_book/core src/rational_book/modules/arithmetic/domain"

STEPS = [
    ("Lint (ruff)", "ruff check src/ tests/", False),
    ("Tipos del dominio (mypy)", f"mypy {DOMAIN_PATHS} --ignore-missing-imports", True),
    ("Tests unitarios", "pytest tests/core tests/modules tests/scripts -q", True),
    ("Tests E2E (CLI como proceso)", "pytest tests/e2e -q", True),
]


def run_step(index: int, title: str, command: str) -> bool:
    print(f"\n[{index}/{len(STEPS)}] {title}\n    $ {command}")
    start = time.perf_counter()
    result = subprocess.run(command, shell=True, capture_output=True, text=True)
    elapsed = time.perf_counter() - start

    if result.returncode == 0:
        print(f"    {GREEN}✅ ok ({elapsed:.2f}s){RESET}")
        return True

    print(f"    {RED}❌ falló ({elapsed:.2f}s){RESET}")
    print(result.stdout)
    print(result.stderr, file=sys.stderr)
    return False


def main():
    start_total = time.perf_counter()
    print(f"🚀 CI rational-book — {datetime.now():%Y-%m-%d %H:%M:%S}")

    for index, (title, command, blocking) in enumerate(STEPS, 1):
        if run_step(index, title, command):
            continue
        if blocking:
            sys.exit(1)
        print(f"    {YELLOW}⚠️  No bloqueante, se continúa{RESET}")

    print(f"\n{GREEN}🎉 BUILD OK en {time.perf_counter() - start_total:.2f}s{RESET}")


if __name__ == "__main__":
    main()
