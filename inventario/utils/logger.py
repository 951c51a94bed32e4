"""
Sistema de Logging Estructurado para Inventario
Logging a consola y a archivo con rotacion.
"""
import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

# Directorio de logs (relativo a la raiz del proyecto, configurable por entorno)
LOG_DIR = Path(os.environ.get("INVENTARIO_LOG_DIR", Path(__file__).parent.parent.parent / "logs"))

# Formato de log
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Obtiene un logger configurado con handlers de consola y archivo.

    Args:
        name: Nombre del logger (usar __name__ del modulo)
        level: Nivel minimo para la consola (default: INFO)

    Returns:
        Logger configurado

    Example:
        >>> from inventario.utils.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Mensaje informativo")
    """
    logger = logging.getLogger(name)

    # Evitar configuracion duplicada si ya tiene handlers
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)  # Captura todo, los handlers filtran

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        # Sin permisos de escritura: solo consola
        return logger

    file_handler = RotatingFileHandler(
        LOG_DIR / "inventario.log",
        maxBytes=10_000_000,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    error_handler = RotatingFileHandler(
        LOG_DIR / "inventario_errors.log",
        maxBytes=5_000_000,  # 5 MB
        backupCount=3,
        encoding='utf-8'
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(error_handler)

    return logger

