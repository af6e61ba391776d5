"""
File Upload Component
"""
from .routes import file_upload_bp
from .service import FileUploadService, file_extension, load_file, summarise_table


def init_file_upload(app):
    """Initialize File Upload component with Flask app"""
    app.register_blueprint(file_upload_bp)
    return file_upload_bp


__all__ = [
    'file_upload_bp',
    'FileUploadService',
    'file_extension',
    'init_file_upload',
    'load_file',
    'summarise_table',
]
