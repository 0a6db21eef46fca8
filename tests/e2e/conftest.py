# tests/e2e/conftest.py
import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


def _isolated_env(**extra_env: str) -> dict:
    env = os.environ.copy()
    env.pop("RATIONAL_BOOK_LOG_FILE", None)
    env.pop("LOG_FORMAT", None)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in [str(SRC_DIR), env.get("PYTHONPATH", "")] if p
    )
    env.update(extra_env)
    return env


@pytest.fixture
def run_python(tmp_path):
    """
    Factory para ejecutar un intérprete real con argumentos arbitrarios.
    Aísla el entorno: PYTHONPATH apunta a src/ y el cwd es un directorio temporal.
    """

    def _run(*args: str, **extra_env: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, *args],
            capture_output=True,
            text=True,
            cwd=tmp_path,
            env=_isolated_env(**extra_env),
            timeout=60,
        )

    return _run


@pytest.fixture
def run_cli(run_python):
    """Factory para ejecutar la CLI como proceso real (python -m ...)."""

    def _run(*args: str, **extra_env: str) -> subprocess.CompletedProcess:
        return run_python(
            "-m", "rational_book.modules.arithmetic.presentation.cli", *args, **extra_env
        )

    return _run
