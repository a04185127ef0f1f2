# utils/__init__.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Utility module exports

from .logger import (
    LegoLogger,
    LogLevel,
    configure_logging,
    get_logger,
    set_log_level,
)

__all__ = [
    "LegoLogger",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
