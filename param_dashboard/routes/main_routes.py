"""
Main page routes for dashboard
"""
from datetime import datetime

from flask import Blueprint, current_app, render_template

from ..components import get_service

# Create main blueprint
main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def dashboard():
    """Main dashboard page"""
    inputs_html = get_service('parameter_inputs').render_row()
    upload_extensions = sorted(current_app.config.get('UPLOAD_EXTENSIONS', {}))

    return render_template('dashboard.html',
                           inputs_html=inputs_html,
                           upload_extensions=upload_extensions,
                           current_time=datetime.now())
