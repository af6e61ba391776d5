"""
Halting conditions for request handlers

Service functions raise these instead of building responses, so the same
function works inside a request, a test or a notebook. The Flask layer turns
them into responses in register_error_handlers().
"""
import logging

from flask import jsonify

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """User-facing failure that stops further processing"""

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class SilentHalt(Exception):
    """Input is not ready yet; stop without reporting an error"""


def validate(message):
    """Fail with a message shown to the user"""
    raise ValidationError(message)


def need(condition, message):
    """Fail with message unless condition holds"""
    if not condition:
        raise ValidationError(message)


def is_truthy(value):
    """Whether a value counts as 'available' for req()

    Numbers (including 0) are available; None, False, empty strings and
    empty collections are not.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return True
    if hasattr(value, 'empty') and not callable(value.empty):
        # pandas objects refuse bool()
        return not value.empty
    return bool(value)


def req(*values):
    """Silently halt unless every value is available; returns the first one"""
    for value in values:
        if not is_truthy(value):
            raise SilentHalt()
    return values[0] if values else None


def register_error_handlers(app):
    """Translate halting conditions into HTTP responses"""

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        logger.warning(f"Validation failed: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(SilentHalt)
    def handle_silent_halt(error):
        return '', 204

    return app
