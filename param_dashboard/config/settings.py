"""
Dashboard configuration settings
"""
import os


class DashboardConfig:
    """Centralized configuration for dashboard"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')
    HOST = os.environ.get('DASHBOARD_HOST', '127.0.0.1')
    PORT = int(os.environ.get('DASHBOARD_PORT', 8081))

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "100 per minute"

    # Uploads - Werkzeug rejects larger bodies with 413
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024
    UPLOAD_EXTENSIONS = {
        'csv': ',',
        'tsv': '\t',
    }
    UPLOAD_ERROR_MESSAGE = 'Invalid file; Please upload a .csv or .tsv file'
    PREVIEW_ROWS = 5

    # Slider defaults shared by every generated slider
    SLIDER_DEFAULTS = {
        'min': 0,
        'max': 1,
        'value': 0.5,
        'step': 0.1,
    }

    # Optional CSV with id,min,max[,label,value,step] columns
    PARAMETER_TABLE = os.environ.get('PARAMETER_TABLE')

    # Used when PARAMETER_TABLE is not set
    PARAMETERS = [
        {'id': 'alpha', 'min': 0, 'max': 1},
        {'id': 'beta', 'min': 0, 'max': 10},
        {'id': 'gamma', 'min': -1, 'max': 1},
        {'id': 'delta', 'min': 0, 'max': 1},
    ]

    DATE_INPUT = {
        'id': 'report_date',
        'label': 'Report date',
    }

    # UI settings
    MAX_LOG_ENTRIES = 1000

    @classmethod
    def get_upload_delimiter(cls, extension):
        """Get the delimiter for an upload extension, None if unsupported"""
        return cls.UPLOAD_EXTENSIONS.get(extension)
