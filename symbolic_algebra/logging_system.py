"""
Logging System for Symbolic Algebra

Centralized logging with verbosity levels so that library code can report
what it is doing without cluttering the terminal of the caller.
"""

import logging
import sys
import time
from datetime import datetime
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Enumeration of verbosity levels"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Warnings and final results
    MODERATE = 2    # Progress updates
    DETAILED = 3    # Per-operation information
    VERBOSE = 4     # All information including debug details


class AlgebraLogger:
    """
    Centralized logger for the symbolic algebra package
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.last_progress_time = 0.0

        self.logger = logging.getLogger('symbolic_algebra')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()
        self.logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_algebra_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def should_log(self, required_level: LogLevel) -> bool:
        """Check if a message at required_level would be emitted"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged unless silent"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self.should_log(required_level):
            self.logger.info(message)

    def progress(self, message: str, force: bool = False):
        """Progress updates, throttled to one per second unless forced"""
        if not self.should_log(LogLevel.MODERATE):
            return

        current_time = time.time()
        if force or (current_time - self.last_progress_time) >= 1.0:
            self.logger.info(f"PROGRESS: {message}")
            self.last_progress_time = current_time

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self.should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self.should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[AlgebraLogger] = None


def get_logger() -> AlgebraLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = AlgebraLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = AlgebraLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> AlgebraLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = AlgebraLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_progress(message: str, force: bool = False):
    """Log progress message"""
    get_logger().progress(message, force)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)


def debug_enabled() -> bool:
    """True when debug messages would be emitted"""
    return get_logger().should_log(LogLevel.VERBOSE)
