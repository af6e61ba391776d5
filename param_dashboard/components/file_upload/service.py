"""
File Upload Service
Parses uploaded delimited files; the route only moves bytes to disk
"""
import logging
import os

import pandas as pd

from ...components import register_component
from ...config.settings import DashboardConfig
from ...core.validation import validate

logger = logging.getLogger(__name__)


def file_extension(name):
    """Lower-case extension of name without the dot, '' if none"""
    _, ext = os.path.splitext(name or '')
    return ext[1:].lower()


def load_file(name, path, delimiters=None, message=None):
    """Read an uploaded file into a DataFrame

    name is the original upload name and decides the delimiter; path is
    where the bytes actually live. Unsupported extensions fail validation.
    """
    ext = file_extension(name)
    if delimiters is None:
        delimiter = DashboardConfig.get_upload_delimiter(ext)
    else:
        delimiter = delimiters.get(ext)

    if delimiter is None:
        validate(message or DashboardConfig.UPLOAD_ERROR_MESSAGE)

    return pd.read_csv(path, sep=delimiter)


def summarise_table(frame, n_rows=5):
    """Preview of a DataFrame: columns, row count and the first rows"""
    head = frame.head(n_rows)
    # NaN is not valid JSON
    head = head.astype(object).where(pd.notna(head), None)
    return {
        'columns': [str(column) for column in frame.columns],
        'n_rows': int(len(frame)),
        'rows': head.to_dict(orient='records'),
    }


@register_component('file_upload')
class FileUploadService:
    """Service for File Upload component"""

    def __init__(self, config):
        self.delimiters = config.get('UPLOAD_EXTENSIONS', DashboardConfig.UPLOAD_EXTENSIONS)
        self.error_message = config.get('UPLOAD_ERROR_MESSAGE', DashboardConfig.UPLOAD_ERROR_MESSAGE)
        self.preview_rows = config.get('PREVIEW_ROWS', DashboardConfig.PREVIEW_ROWS)

    def preview_upload(self, name, path):
        """Parse an upload and return its preview"""
        frame = load_file(name, path, delimiters=self.delimiters, message=self.error_message)
        preview = summarise_table(frame, self.preview_rows)
        preview['filename'] = name
        logger.info(f"Parsed upload {name}: {preview['n_rows']} rows, {len(preview['columns'])} columns")
        return preview
