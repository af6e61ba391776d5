"""
Parameter Inputs Component Routes
"""
import logging

from flask import Blueprint, jsonify, request

from ...components import get_service

logger = logging.getLogger(__name__)

# Create blueprint for parameter input routes
parameter_inputs_bp = Blueprint('parameter_inputs', __name__)


@parameter_inputs_bp.route('/api/sliders', methods=['GET'])
def api_get_sliders():
    """Slider descriptors for the configured parameter table

    Bad rows in the table are a ValidationError (400); an unreadable
    table file is a server error.
    """
    try:
        sliders = get_service('parameter_inputs').build_sliders()
    except OSError as e:
        logger.exception(f"Failed to build configured sliders: {e}")
        return jsonify({'error': 'Failed to load parameter table', 'details': str(e)}), 500
    return jsonify(sliders)


@parameter_inputs_bp.route('/api/sliders', methods=['POST'])
def api_build_sliders():
    """Build sliders from posted records or a list of ids

    Body is either a list of parameter records or {"ids": [...]}.
    """
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({'error': 'No data provided'}), 400

    service = get_service('parameter_inputs')
    try:
        if isinstance(data, dict) and 'ids' in data:
            if not isinstance(data['ids'], list):
                return jsonify({'error': "'ids' must be a list"}), 400
            sliders = service.build_unit_sliders(data['ids'])
        elif isinstance(data, list) and all(isinstance(item, dict) for item in data):
            sliders = service.build_sliders(data)
        else:
            return jsonify({'error': 'Expected a list of parameter records or {"ids": [...]}'}), 400
    except (TypeError, ValueError) as e:
        return jsonify({'error': str(e)}), 400

    logger.info(f"Built {len(sliders)} sliders from request")
    return jsonify(sliders)


@parameter_inputs_bp.route('/components/parameter_inputs/template')
def parameter_inputs_template():
    """Serve the rendered input row for inclusion"""
    return get_service('parameter_inputs').render_row()
