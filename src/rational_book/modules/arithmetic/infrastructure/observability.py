# src/rational_book/modules/arithmetic/infrastructure/observability.py
"""
Servicio de Observabilidad SRE: Logs, Latency & Saturation (RAM).
Soporta modo "Pretty Print" para depuración visual.

Principios:
1. Logs estructurados (JSON) para máquinas.
2. Logs legibles para humanos (Consola).
3. Contexto (correlation_id + operando) en cada evento.
"""

import functools
import json
import logging
import os
import sys
import time
import uuid
from typing import Any, Callable, Optional

import psutil

from rational_book.modules.arithmetic.domain.exceptions import RationalArithmeticError
from rational_book.modules.arithmetic.domain.value_objects import RationalNumber

logger = logging.getLogger("rational_book")
# Sin configuración explícita, los eventos no llegan a ningún sink
logger.addHandler(logging.NullHandler())

LOG_FILE_ENV = "RATIONAL_BOOK_LOG_FILE"


def configure_logging(level=logging.INFO, log_file: Optional[str] = None):
    """
    Configura el sistema de logging: consola (stderr) siempre, archivo opcional.
    stdout queda reservado para la salida de la aplicación.
    """
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Limpiar handlers previos (cerrándolos) para evitar duplicados y fds abiertos
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.addHandler(console_handler)

    if log_file:
        # Formateador detallado para archivo (Forensics)
        file_formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
        )
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)
        logger.debug(f"🔭 Observabilidad iniciada. Logs persistentes en: {log_file}")


class ObservabilityService:

    # 🌍 CONFIGURACIÓN GLOBAL
    # Si esta variable de entorno existe, activamos la vista vertical
    PRETTY_PRINT = os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            process = psutil.Process(os.getpid())
            return round(process.memory_info().rss / 1024 / 1024, 2)
        except Exception:
            return 0.0

    @staticmethod
    def _extract_target(args: tuple) -> str:
        for arg in args:
            if isinstance(arg, RationalNumber):
                try:
                    return arg.to_text()
                except ValueError:
                    # Supera sys.get_int_max_str_digits(); el log no debe romper la operación
                    return "<demasiado grande>"
        return "unknown"

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un log estructurado en JSON (Horizontal o Vertical)."""

        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.PRETTY_PRINT:
            msg = json.dumps(log_entry, indent=4)
        else:
            msg = json.dumps(log_entry)

        if level == "ERROR":
            logger.error(msg)
        elif level == "WARNING":
            logger.warning(msg)
        else:
            logger.info(msg)

    @staticmethod
    def measure_latency(operation_name: str):
        def decorator(func: Callable):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.perf_counter()
                start_ram = ObservabilityService._get_ram_usage_mb()
                correlation_id = ObservabilityService.get_correlation_id()
                target = ObservabilityService._extract_target(args)

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.started",
                    correlation_id=correlation_id,
                    payload={"target": target, "start_ram_mb": start_ram},
                )

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    # Precondición violada por el caller: esperado, no es un fallo del sistema
                    level = "WARNING" if isinstance(e, RationalArithmeticError) else "ERROR"
                    crash_ram = ObservabilityService._get_ram_usage_mb()
                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.failed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(time.perf_counter() - start_time, 6),
                            "crash_ram_mb": crash_ram,
                            "target": target,
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level=level,
                    )
                    raise

                end_ram = ObservabilityService._get_ram_usage_mb()
                ObservabilityService.log_event(
                    event_name=f"{operation_name}.completed",
                    correlation_id=correlation_id,
                    payload={
                        "duration_sec": round(time.perf_counter() - start_time, 6),
                        "end_ram_mb": end_ram,
                        "ram_delta_mb": round(end_ram - start_ram, 2),
                        "target": target,
                        "status": "success",
                    },
                )
                return result

            return wrapper

        return decorator
