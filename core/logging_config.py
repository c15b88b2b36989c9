"""
Logging Configuration for passwordcheck

Features:
- Optional rotating file handler
- Colored console output
- Configurable log levels (LOG_LEVEL)

The library itself only creates module loggers; applications that want
output call LoggingConfig.setup_logging() once at startup.
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from version import APP_NAME, VERSION


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',  # Cyan
        'INFO': '\033[32m',  # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',  # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # work on a copy so other handlers keep the plain level name
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
            )
        return super().format(record)


class LoggingConfig:
    """Centralized logging configuration"""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
    DEFAULT_BACKUP_COUNT = 5
    LOG_FILE_NAME = f"{APP_NAME}.log"

    @staticmethod
    def setup_logging(
            log_level: Optional[str] = None,
            log_dir: Optional[str] = None,
            enable_console: bool = True,
            enable_colors: bool = True,
    ) -> logging.Logger:
        """Setup logging; falls back to LOG_LEVEL / LOG_DIR from core.config"""
        from core.config import get_config, get_log_level
        from constants import ConfigKeys

        log_level = (log_level or get_log_level()).upper()
        level = getattr(logging, log_level, None)
        if not isinstance(level, int):
            level = getattr(logging, LoggingConfig.DEFAULT_LOG_LEVEL)
        log_dir = log_dir or get_config().get(ConfigKeys.LOG_DIR)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        detailed_format = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Console handler
        if enable_console and sys.stdout is not None:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)

            is_tty = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

            if enable_colors and is_tty:
                console_handler.setFormatter(ColoredFormatter(
                    '%(asctime)s - %(levelname)s - %(message)s',
                    datefmt='%H:%M:%S'
                ))
            else:
                console_handler.setFormatter(detailed_format)

            root_logger.addHandler(console_handler)

        # File handler
        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(exist_ok=True, parents=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path / LoggingConfig.LOG_FILE_NAME,
                maxBytes=LoggingConfig.DEFAULT_MAX_BYTES,
                backupCount=LoggingConfig.DEFAULT_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_format)
            root_logger.addHandler(file_handler)

        root_logger.info(f"Logging initialized ({APP_NAME} {VERSION}).")
        return root_logger
