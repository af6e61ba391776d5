"""
Core services for dashboard components
"""
from collections import deque

from ..config.settings import DashboardConfig
from .log_buffer import DequeLogHandler, attach_log_buffer
from .validation import (
    SilentHalt,
    ValidationError,
    is_truthy,
    need,
    register_error_handlers,
    req,
    validate,
)

# Global state - shared across all components
system_logs = deque(maxlen=DashboardConfig.MAX_LOG_ENTRIES)

__all__ = [
    'DequeLogHandler',
    'attach_log_buffer',
    'SilentHalt',
    'ValidationError',
    'is_truthy',
    'need',
    'register_error_handlers',
    'req',
    'validate',
    'system_logs',
]
