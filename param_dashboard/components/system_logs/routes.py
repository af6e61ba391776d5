"""
System Logs Component Routes
"""
from flask import Blueprint, jsonify, request

from ...components import get_service
from .service import LOG_LEVELS

# Create blueprint for system logs routes
system_logs_bp = Blueprint('system_logs', __name__)


@system_logs_bp.route('/api/logs')
def api_logs():
    """Get system logs with filtering

    Query parameters: level (ALL or a logging level name), limit.
    """
    level_filter = request.args.get('level', 'ALL').upper()
    if level_filter != 'ALL' and level_filter not in LOG_LEVELS:
        return jsonify({'error': f'Unknown log level: {level_filter}'}), 400

    try:
        limit = int(request.args.get('limit', 50))
    except ValueError:
        return jsonify({'error': 'limit must be an integer'}), 400
    if limit < 0:
        return jsonify({'error': 'limit must not be negative'}), 400

    logs = get_service('system_logs').get_logs(level_filter=level_filter, limit=limit)
    return jsonify(logs)
