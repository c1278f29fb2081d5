"""
Structured logging system for the employee service.

Provides centralized logging with console and file outputs, log levels,
and per-operation metrics for monitoring service activity.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json

from .env import load_settings

OPERATIONS = ("get", "create", "update", "delete")


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks metrics for service operations.
    """

    def __init__(
        self,
        name: str = "employees",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()  # Remove existing handlers

        self.metrics = {
            "operations": {op: 0 for op in OPERATIONS},
            "not_found": {op: 0 for op in OPERATIONS},
            "failures": {op: 0 for op in OPERATIONS},
            "errors_by_type": {},
        }

        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"employees_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message with optional context."""
        self._log(logging.CRITICAL, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_operation(self, operation: str):
        """Record a service call."""
        ops = self.metrics["operations"]
        ops[operation] = ops.get(operation, 0) + 1

    def record_not_found(self, operation: str):
        """Record a lookup that found no employee."""
        missing = self.metrics["not_found"]
        missing[operation] = missing.get(operation, 0) + 1

    def record_failure(self, operation: str, error_type: str):
        """Record a datastore or mapping failure."""
        failed = self.metrics["failures"]
        failed[operation] = failed.get(operation, 0) + 1

        if error_type not in self.metrics["errors_by_type"]:
            self.metrics["errors_by_type"][error_type] = 0
        self.metrics["errors_by_type"][error_type] += 1

    def get_metrics(self) -> dict:
        """Return a snapshot of current metrics."""
        metrics_copy = {
            "operations": dict(self.metrics["operations"]),
            "not_found": dict(self.metrics["not_found"]),
            "failures": dict(self.metrics["failures"]),
            "errors_by_type": dict(self.metrics["errors_by_type"]),
        }
        metrics_copy["total_operations"] = sum(metrics_copy["operations"].values())
        metrics_copy["total_failures"] = sum(metrics_copy["failures"].values())
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Employee Service Metrics ===")
        self.info(f"Operations: {metrics['total_operations']}")
        for operation, count in metrics["operations"].items():
            missing = metrics["not_found"].get(operation, 0)
            failed = metrics["failures"].get(operation, 0)
            self.info(f"  {operation}: {count} ({missing} not found, {failed} failed)")

        if metrics["errors_by_type"]:
            self.info("Error Types:")
            for error_type, count in metrics["errors_by_type"].items():
                self.info(f"  {error_type}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "employees",
    level: Optional[str] = None,
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Level and log directory default to EMPLOYEES_LOG_LEVEL and
    EMPLOYEES_LOG_DIR. File logging is off unless a directory is known.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        settings = load_settings()
        kwargs.setdefault("log_dir", settings.log_dir)
        kwargs.setdefault("enable_file", kwargs["log_dir"] is not None)
        _global_logger = StructuredLogger(name=name, level=level or settings.log_level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
