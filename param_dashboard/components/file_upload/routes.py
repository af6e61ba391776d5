"""
File Upload API Routes
"""
import logging
import os
import tempfile

from flask import Blueprint, jsonify, request
from werkzeug.utils import secure_filename

from ...components import get_service
from ...core.validation import req

logger = logging.getLogger(__name__)

file_upload_bp = Blueprint('file_upload', __name__)


@file_upload_bp.route('/api/upload', methods=['POST'])
def api_upload():
    """Parse an uploaded .csv/.tsv file and return a preview

    No file yet: 204. Wrong extension: 400 with the validation message.
    """
    upload = req(request.files.get('file'))
    req(upload.filename)

    # The type comes from the name the client sent; the cleaned name is only for logs
    log_name = secure_filename(upload.filename) or repr(upload.filename)
    fd, temp_path = tempfile.mkstemp(prefix='upload-')
    try:
        with os.fdopen(fd, 'wb') as f:
            upload.save(f)
        preview = get_service('file_upload').preview_upload(upload.filename, temp_path)
    except ValueError as e:
        # pandas parser errors and undecodable bytes
        logger.warning(f"Could not parse upload {log_name}: {e}")
        return jsonify({'error': f'Could not parse {upload.filename}', 'details': str(e)}), 400
    finally:
        os.remove(temp_path)

    return jsonify(preview)
