"""
OrcaLog - logging utility for the orca_path package

Every module logs through one shared logger:
1. Millisecond timestamps (YYYY-MM-DD HH:mm:ss.SSS)
2. Function, file and line of the caller
3. Colored console output, plain text in files
4. Optional size-based file rotation, enabled only when a log directory is configured

Configuration is read from the environment when the logger is first created:
    ORCA_PATH_LOG_LEVEL   console level (default WARNING)
    ORCA_PATH_LOG_DIR     directory for orca_path.log (file logging is off when unset)
"""

import logging
from logging.handlers import RotatingFileHandler
import sys
import os
import re
import inspect
import threading
from typing import Optional

LOG_LEVEL_ENV = "ORCA_PATH_LOG_LEVEL"
LOG_DIR_ENV = "ORCA_PATH_LOG_DIR"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name on console output."""

    COLORS = {
        'DEBUG': '\033[36m',       # Cyan
        'INFO': '\033[32m',        # Green
        'WARNING': '\033[33m',     # Yellow
        'ERROR': '\033[31m',       # Red
        'CRITICAL': '\033[35m',    # Magenta
        'RESET': '\033[0m'
    }

    LEVEL_WIDTH = 8

    def __init__(self, *args, use_colors=True, **kwargs):
        super().__init__(*args, **kwargs)
        self.use_colors = use_colors

    def format(self, record):
        text = super().format(record)
        if not self.use_colors:
            return text

        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        pattern = rf'\] {re.escape(record.levelname)}\s+\|'
        replacement = f'] {color}{record.levelname.ljust(self.LEVEL_WIDTH)}{self.COLORS["RESET"]} |'
        return re.sub(pattern, replacement, text, count=1)


def _check_level(level: str) -> str:
    level = level.upper()
    if level not in LEVELS:
        raise ValueError(f"Unknown log level '{level}', expected one of {', '.join(LEVELS)}")
    return level


class OrcaLog:
    """
    Singleton logger shared by all orca_path modules.

    The first construction configures the handlers; later constructions return the
    same instance untouched unless force_reinit is set.
    """

    _instance = None
    _initialized = False
    _lock = threading.Lock()

    LOG_FORMAT = '[%(asctime)s.%(msecs)03d] %(levelname)-8s | %(funcName)-20s | %(filename)s:%(lineno)-4d | %(message)s'
    DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

    def __new__(cls, *args, **kwargs):
        with cls._lock:
            if cls._instance is None:
                cls._instance = super(OrcaLog, cls).__new__(cls)
        return cls._instance

    def __init__(
        self,
        name: str = "OrcaPath",
        log_file: str = "orca_path.log",
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        console_level: Optional[str] = None,
        file_level: str = "DEBUG",
        log_dir: Optional[str] = None,
        use_colors: bool = True,
        force_reinit: bool = False
    ):
        """
        Args:
            name: Logger name
            log_file: Log file name inside log_dir
            max_bytes: Maximum file size before rotation (bytes)
            backup_count: Number of rotated files to keep
            console_level: Console level, defaults to $ORCA_PATH_LOG_LEVEL or WARNING
            file_level: File level
            log_dir: Directory for the log file, defaults to $ORCA_PATH_LOG_DIR; no file output if neither is set
            use_colors: Color the console output
            force_reinit: Reconfigure an already initialized logger
        """
        with self._lock:
            if self._initialized and not force_reinit:
                return

            self.name = name
            self.log_file = log_file
            self.max_bytes = max_bytes
            self.backup_count = backup_count
            if console_level is None:
                # An unknown level in the environment must not break importing the package.
                console_level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
                if console_level.upper() not in LEVELS:
                    console_level = "WARNING"
            self.console_level = _check_level(console_level)
            self.file_level = _check_level(file_level)
            self.log_dir = log_dir or os.environ.get(LOG_DIR_ENV) or None
            self.use_colors = use_colors

            self.log_path = None
            if self.log_dir is not None:
                os.makedirs(self.log_dir, exist_ok=True)
                self.log_path = os.path.join(self.log_dir, self.log_file)

            self._setup_logger()
            OrcaLog._initialized = True

    def _setup_logger(self):
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, self.console_level))
        console_handler.setFormatter(
            ColoredFormatter(self.LOG_FORMAT, datefmt=self.DATE_FORMAT, use_colors=self.use_colors)
        )
        self.logger.addHandler(console_handler)

        if self.log_path is not None:
            file_handler = RotatingFileHandler(
                self.log_path,
                maxBytes=self.max_bytes,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(getattr(logging, self.file_level))
            file_handler.setFormatter(logging.Formatter(self.LOG_FORMAT, datefmt=self.DATE_FORMAT))
            self.logger.addHandler(file_handler)

    def _log_with_caller(self, level: int, message: str):
        # Skip this method and the public wrapper to report the real caller.
        frame = inspect.currentframe()
        try:
            caller_info = inspect.getframeinfo(frame.f_back.f_back)
            record = self.logger.makeRecord(
                self.logger.name, level, caller_info.filename,
                caller_info.lineno, message, (), None
            )
            record.funcName = caller_info.function
            self.logger.handle(record)
        finally:
            del frame

    def fatal(self, message: str):
        self._log_with_caller(logging.CRITICAL, message)

    def error(self, message: str):
        self._log_with_caller(logging.ERROR, message)

    def warning(self, message: str):
        self._log_with_caller(logging.WARNING, message)

    def info(self, message: str):
        self._log_with_caller(logging.INFO, message)

    def debug(self, message: str):
        self._log_with_caller(logging.DEBUG, message)

    def set_console_level(self, level: str):
        self.console_level = _check_level(level)
        for handler in self.logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, RotatingFileHandler):
                handler.setLevel(getattr(logging, self.console_level))

    def set_file_level(self, level: str):
        self.file_level = _check_level(level)
        for handler in self.logger.handlers:
            if isinstance(handler, RotatingFileHandler):
                handler.setLevel(getattr(logging, self.file_level))

    def get_log_info(self) -> dict:
        return {
            'name': self.name,
            'log_file': self.log_path,
            'max_bytes': self.max_bytes,
            'backup_count': self.backup_count,
            'console_level': self.console_level,
            'file_level': self.file_level,
            'log_dir': self.log_dir,
            'use_colors': self.use_colors
        }

    def log_system_info(self):
        """Log platform details, useful when attaching logs to bug reports."""
        import platform
        import psutil

        self.info("=== System Information ===")
        self.info(f"Platform: {platform.platform()}")
        self.info(f"Python Version: {platform.python_version()}")
        self.info(f"CPU Count: {psutil.cpu_count()}")
        self.info(f"Memory: {psutil.virtual_memory().total / (1024**3):.2f} GB")
        self.info("==========================")

    @classmethod
    def get_instance(cls, **kwargs) -> 'OrcaLog':
        """
        Return the shared instance, creating it on first use. Passing kwargs to an
        existing instance reconfigures it.
        """
        if cls._instance is None or not cls._initialized:
            return cls(**kwargs)
        if kwargs:
            kwargs.pop('force_reinit', None)
            cls._instance.__init__(force_reinit=True, **kwargs)
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the shared instance and close its handlers (used by tests)."""
        with cls._lock:
            if cls._instance is not None and hasattr(cls._instance, 'logger'):
                for handler in cls._instance.logger.handlers[:]:
                    cls._instance.logger.removeHandler(handler)
                    handler.close()
            cls._instance = None
            cls._initialized = False

    def is_initialized(self) -> bool:
        return self._initialized


def get_orca_logger(**kwargs) -> OrcaLog:
    """Get the shared OrcaLog instance. kwargs only apply on first creation."""
    if OrcaLog._initialized:
        return OrcaLog._instance
    return OrcaLog.get_instance(**kwargs)
