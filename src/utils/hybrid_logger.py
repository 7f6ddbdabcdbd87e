"""
Hybrid logging - coloured console output plus a timestamped log file per run

Every component gets its own ClassLogger (own level, own [class] column)
while all of them share the handlers of one stdlib logger.
"""

import logging
import sys
import traceback
from contextlib import suppress
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional


class ColoredFormatter(logging.Formatter):
    """[time] [LEVEL] [Class] message, coloured per level when enabled"""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[94m',    # Blue
        'INFO': '\033[92m',     # Green
        'WARNING': '\033[93m',  # Yellow
        'ERROR': '\033[91m',    # Red
        'CRITICAL': '\033[95m', # Magenta
    }
    RESET = '\033[0m'

    FORMAT = '[%(asctime)s] [%(levelname)s] [%(class_name)s] %(message)s'

    def __init__(self, use_colors: bool = False):
        super().__init__(self.FORMAT)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'class_name'):
            record.class_name = 'Main'

        formatted = super().format(record)
        if not self.use_colors:
            return formatted
        return f"{self.COLORS.get(record.levelname, self.RESET)}{formatted}{self.RESET}"


class ClassLogger:
    """
    Logger handle for one component.

    Records below `level` are dropped before they reach the shared handlers.
    error() and critical() flush the handlers so the last lines survive a
    crash or a pulled power plug.
    """

    def __init__(self, main_logger: logging.Logger, class_name: str, level: int):
        self.main_logger = main_logger
        self.class_name = class_name
        self.level = level

    def is_enabled_for(self, level: int) -> bool:
        return level >= self.level

    def _log(self, level: int, message: str, exc_info: bool = False) -> None:
        if not self.is_enabled_for(level):
            return
        record = self.main_logger.makeRecord(
            self.main_logger.name, level, "", 0, message, (),
            sys.exc_info() if exc_info else None
        )
        record.class_name = self.class_name
        self.main_logger.handle(record)

    def create_class_logger(self, class_name: str, level: Optional[int] = None) -> 'ClassLogger':
        """
        Logger for a child component (e.g. one module instance).

        Args:
            class_name: Name shown in the [class] column
            level: Minimum log level, defaults to this logger's level

        Returns:
            ClassLogger sharing this logger's handlers
        """
        return ClassLogger(self.main_logger, class_name, self.level if level is None else level)

    def debug(self, message: str) -> None:
        self._log(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._log(logging.WARNING, message)

    def error(self, message: str, exception: Optional[Exception] = None) -> None:
        """
        Log an error, optionally with where the exception was raised.

        Args:
            message: Error description
            exception: Exception to summarise (type, file, line) and attach
        """
        if exception is None:
            self._log(logging.ERROR, message)
        else:
            frames = traceback.extract_tb(exception.__traceback__)
            filename, lineno = (frames[-1].filename, frames[-1].lineno) if frames else ("unknown", 0)
            self._log(
                logging.ERROR,
                f"{message} | Type: {type(exception).__name__} | File: {filename} | Line: {lineno}",
                exc_info=True
            )
        self.flush()

    def critical(self, message: str) -> None:
        self._log(logging.CRITICAL, message)
        self.flush()

    def flush(self) -> None:
        for handler in self.main_logger.handlers:
            with suppress(OSError, ValueError):
                handler.flush()


class HybridLogger:
    """
    Logger factory for one run of the module box.

    Writes everything at DEBUG and above to logs/<name>_<timestamp>.log and
    console_level and above to stdout. Only the newest max_log_files logs of
    this name are kept, so a box left running for weeks does not fill its
    SD card.

    Example:
        main_logger = HybridLogger("BinaryLeds")
        logger = main_logger.get_class_logger("GameManager", logging.INFO)
        logger.info("Started")
        main_logger.cleanup()
    """

    def __init__(self,
                 name: str = "app",
                 log_dir: str = "logs",
                 console: bool = True,
                 console_level: int = logging.DEBUG,
                 max_log_files: Optional[int] = 20):
        """
        Args:
            name: Logger name and log file prefix
            log_dir: Directory for log files (created if missing)
            console: Also log to stdout
            console_level: Minimum level printed to stdout
            max_log_files: Log files of this name to keep, None keeps all
        """
        self.name = name
        self.log_dir = Path(log_dir)
        self.console = console
        self.console_level = console_level
        self.max_log_files = max_log_files
        self.class_loggers: Dict[str, ClassLogger] = {}

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.log_dir / f"{name}_{datetime.now().strftime('%Y-%m-%d_%H-%M-%S')}.log"

        self.main_logger = logging.getLogger(name)
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False
        self.main_logger.handlers.clear()
        for handler in self._create_handlers():
            self.main_logger.addHandler(handler)

        self._prune_old_logs()

    def _create_handlers(self) -> List[logging.Handler]:
        handlers: List[logging.Handler] = []
        if self.console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(self.console_level)
            console_handler.setFormatter(ColoredFormatter(use_colors=True))
            handlers.append(console_handler)

        file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
        file_handler.setFormatter(ColoredFormatter(use_colors=False))
        handlers.append(file_handler)
        return handlers

    def _prune_old_logs(self) -> None:
        if self.max_log_files is None or self.max_log_files <= 0:
            return
        # Timestamped names sort chronologically
        logs = sorted(self.log_dir.glob(f"{self.name}_*.log"))
        for old_log in logs[:-self.max_log_files]:
            if old_log != self.log_file:
                with suppress(OSError):
                    old_log.unlink()

    def get_class_logger(self, class_name: str, level: int = logging.INFO) -> ClassLogger:
        """
        Logger for a component, created on first use.

        Args:
            class_name: Name shown in the [class] column
            level: Minimum log level for this component

        Returns:
            The component's ClassLogger (same instance on every call)
        """
        if class_name not in self.class_loggers:
            self.class_loggers[class_name] = ClassLogger(self.main_logger, class_name, level)
        return self.class_loggers[class_name]

    def get_main_logger(self, level: int = logging.INFO) -> ClassLogger:
        return self.get_class_logger("Main", level)

    def cleanup(self) -> None:
        """Flush and close all handlers"""
        for handler in self.main_logger.handlers:
            with suppress(OSError, ValueError):
                handler.flush()
                handler.close()
        self.main_logger.handlers.clear()
