"""
Parameter Inputs Component
"""
from .routes import parameter_inputs_bp
from .service import (
    ParameterInputsService,
    fluid_row,
    load_parameter_table,
    parameter_slider,
    render_inputs,
    slider_input,
    sliders_for_ids,
    sliders_from_records,
    unit_slider,
    us_week_date_input,
)


def init_parameter_inputs(app):
    """Initialize Parameter Inputs component with Flask app"""
    app.register_blueprint(parameter_inputs_bp)
    return parameter_inputs_bp


__all__ = [
    'parameter_inputs_bp',
    'ParameterInputsService',
    'init_parameter_inputs',
    'fluid_row',
    'load_parameter_table',
    'parameter_slider',
    'render_inputs',
    'slider_input',
    'sliders_for_ids',
    'sliders_from_records',
    'unit_slider',
    'us_week_date_input',
]
