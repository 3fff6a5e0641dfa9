"""
Logging de MedForecast fuera de la capa de servicios
====================================================
Cada logger escribe a consola y a dos archivos rotativos dentro del
directorio de logs:

- medforecast.log: DEBUG y superiores
- medforecast_errors.log: solo ERROR

El directorio se toma de MEDFORECAST_LOG_DIR; si no esta definido se usa
./logs relativo al directorio de trabajo. Se crea con el primer logger.
"""
import functools
import logging
import os
import sys
import time
from pathlib import Path
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ARCHIVO_GENERAL = "medforecast.log"
ARCHIVO_ERRORES = "medforecast_errors.log"


def directorio_logs() -> Path:
    """Directorio de logs vigente (MEDFORECAST_LOG_DIR o ./logs)"""
    configurado = os.getenv("MEDFORECAST_LOG_DIR", "").strip()
    return Path(configurado) if configurado else Path.cwd() / "logs"


def _handler_archivo(ruta: Path, nivel: int, max_bytes: int, backups: int,
                     formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(ruta, maxBytes=max_bytes, backupCount=backups, encoding='utf-8')
    handler.setLevel(nivel)
    handler.setFormatter(formatter)
    return handler


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Obtiene un logger con handlers de consola y archivo.

    Args:
        name: Nombre del logger (usar __name__ del modulo)
        level: Nivel minimo para la consola (default: INFO)

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Catalogo cargado")
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    # Los handlers filtran; el logger deja pasar todo
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    consola = logging.StreamHandler(sys.stdout)
    consola.setLevel(level)
    consola.setFormatter(formatter)
    logger.addHandler(consola)

    carpeta = directorio_logs()
    carpeta.mkdir(parents=True, exist_ok=True)
    logger.addHandler(_handler_archivo(carpeta / ARCHIVO_GENERAL, logging.DEBUG,
                                       10_000_000, 5, formatter))
    logger.addHandler(_handler_archivo(carpeta / ARCHIVO_ERRORES, logging.ERROR,
                                       5_000_000, 3, formatter))
    return logger


def log_execution_time(func):
    """Decorador: registra en DEBUG cuanto tarda la funcion (o cuando falla)."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        inicio = time.perf_counter()
        try:
            resultado = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{func.__name__} fallo despues de {time.perf_counter() - inicio:.3f}s: {e}")
            raise
        logger.debug(f"{func.__name__} ejecutado en {time.perf_counter() - inicio:.3f}s")
        return resultado

    return wrapper
