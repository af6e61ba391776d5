"""
System Logs Service
"""
from ...components import register_component

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@register_component('system_logs')
class SystemLogsService:
    """Service for System Logs component

    Reads the shared system_logs deque filled by DequeLogHandler.
    """

    def __init__(self, config, buffer=None):
        if buffer is None:
            from ...core import system_logs
            buffer = system_logs
        self.buffer = buffer

    def get_logs(self, level_filter='ALL', limit=50):
        """Get system logs with filtering, most recent last

        A limit of 0, None or below returns every matching entry.
        """
        logs = list(self.buffer)

        if level_filter != 'ALL':
            logs = [log for log in logs if log.get('level') == level_filter]

        if limit and limit > 0 and len(logs) > limit:
            logs = logs[-limit:]

        return logs

    def clear(self):
        self.buffer.clear()
