"""
Logging System for the Symbolic Math Engine

One process-wide logger gated by a LogLevel. Lexing, folding and function-tree
domain errors are traced at VERBOSE; callers check `is_verbose()` before
building those messages so a quiet logger costs nothing on hot paths.
"""

import logging
import sys
from typing import Optional
from enum import Enum


class LogLevel(Enum):
    """Verbosity of the engine's console output"""
    SILENT = 0      # No handlers at all
    MINIMAL = 1     # Warnings
    MODERATE = 2    # Warnings and info
    VERBOSE = 3     # Everything, including per-token and per-fold traces


class SymbolicMathLogger:
    """Wraps the 'symbolic_math' stdlib logger and filters by LogLevel"""

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_file_path: Optional[str] = None):
        self.log_level = log_level

        self.logger = logging.getLogger('symbolic_math')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()
        self.logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file_path is not None:
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        return self.log_level.value >= required_level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.MODERATE):
        if self._should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Trace output, VERBOSE only"""
        if self.is_verbose():
            self.logger.debug(f"DEBUG: {message}")

    def is_verbose(self) -> bool:
        return self._should_log(LogLevel.VERBOSE)


_global_logger: Optional[SymbolicMathLogger] = None


def get_logger() -> SymbolicMathLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicMathLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Change the level of the global logger, keeping its handlers"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicMathLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_file_path: Optional[str] = None) -> SymbolicMathLogger:
    """Replace the global logger; handlers bind to the current sys.stdout"""
    global _global_logger
    _global_logger = SymbolicMathLogger(log_level=log_level, log_file_path=log_file_path)
    return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.MODERATE):
    get_logger().info(message, level)


def log_warning(message: str):
    get_logger().warning(message)
