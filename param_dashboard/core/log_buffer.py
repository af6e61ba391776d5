"""
In-memory log buffer backing the System Logs component
"""
import logging
from datetime import datetime


class DequeLogHandler(logging.Handler):
    """Logging handler that appends entries to a bounded deque"""

    def __init__(self, buffer, level=logging.INFO):
        super().__init__(level)
        self.buffer = buffer

    def emit(self, record):
        try:
            self.buffer.append({
                'timestamp': datetime.fromtimestamp(record.created).isoformat(),
                'level': record.levelname,
                'source': record.name,
                'message': record.getMessage()
            })
        except Exception:
            self.handleError(record)


def attach_log_buffer(buffer, logger_name='param_dashboard', level=logging.INFO):
    """Attach a DequeLogHandler to the package logger once"""
    package_logger = logging.getLogger(logger_name)
    for handler in package_logger.handlers:
        if isinstance(handler, DequeLogHandler) and handler.buffer is buffer:
            return handler

    handler = DequeLogHandler(buffer, level=level)
    package_logger.addHandler(handler)
    if package_logger.level == logging.NOTSET or package_logger.level > level:
        package_logger.setLevel(level)
    return handler
