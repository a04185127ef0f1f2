# utils/logger.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Logging utility for formula evaluation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula evaluation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LegoLogger:
    """Centralized logger for Lego evaluation with structured output."""

    def __init__(self, name: str = "lego", level: LogLevel = LogLevel.WARNING):
        """Initialize the Lego logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(LegoFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for evaluation events
    def evaluation_start(self, formula_text: str):
        """Log the start of a top-level evaluation."""
        self.info("=== Starting Evaluation ===")
        self.info(f"Formula: {formula_text}")

    def quantifier_entered(self, quant: str, var: str, domain: str, depth: int):
        """Log entry into a quantifier scope."""
        indent = "  " * depth
        self.debug(f"{indent}{quant} {var} in {domain} (depth {depth})")

    def quantifier_decided(
        self, quant: str, var: str, result: bool, witness: Optional[int] = None
    ):
        """Log the outcome of a quantifier, with the deciding value if any."""
        if witness is None:
            self.debug(f"    {quant} {var}: {result} after full domain")
        else:
            self.debug(f"    {quant} {var}: {result} short-circuited at {var}={witness}")

    def fault_raised(self, kind: str, message: str):
        """Log an evaluation fault."""
        self.debug(f"    Fault {kind}: {message}")

    def final_result(self, value: bool):
        """Log final evaluation result."""
        self.info(f">>> RESULT: {str(value).lower()} <<<")


class LegoFormatter(logging.Formatter):
    """Custom formatter for Lego logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[LegoLogger] = None


def get_logger(name: str = "lego") -> LegoLogger:
    """Get or create the global Lego logger instance.

    Args:
        name: Logger name (default: "lego")

    Returns:
        LegoLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = LegoLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
