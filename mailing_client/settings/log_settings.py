import logging
from pathlib import Path
from typing import Dict, List, Optional
from logging.handlers import RotatingFileHandler

class MailingLogger:
    """
    Configuración del sistema de logs.
    """
    # Parámetros de rotación: 5MB por archivo, manteniendo hasta 5 backups
    MAX_BYTES: int = 5 * 1024 * 1024
    BACKUP_COUNT: int = 5
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LEVEL_MAP: Dict[str, int] = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL
    }

    @staticmethod
    def setup_logging(level: Optional[str] = "INFO", log_file: Optional[Path] = None) -> None:
        """
        Configura el sistema de logging básico.

        Args:
            level (Optional[str]): Nivel de registro. Ejemplo: "DEBUG", "INFO", etc.
            log_file (Optional[Path]): Archivo con rotación. Si es None solo se usa la consola.

        Returns:
            None
        """
        handlers: List[logging.Handler] = [logging.StreamHandler()]

        if log_file is not None:
            # Aseguramos que el directorio de logs existe
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(RotatingFileHandler(
                filename=log_file,
                mode="a",
                maxBytes=MailingLogger.MAX_BYTES,
                backupCount=MailingLogger.BACKUP_COUNT,
                encoding="utf-8"
            ))

        logging.basicConfig(
            level=MailingLogger.LEVEL_MAP.get((level or "INFO").upper(), logging.INFO),
            format=MailingLogger.LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers
        )
