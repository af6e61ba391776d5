"""
Parameter Inputs Service

Widget helpers return plain descriptor dicts. They never touch Flask, so a
panel of inputs can be built and checked without a running app; the
templates turn descriptors into HTML.
"""
import logging
import math

import pandas as pd
from jinja2 import Environment, PackageLoader, select_autoescape

from ...components import register_component
from ...core.validation import ValidationError

logger = logging.getLogger(__name__)

RECORD_FIELDS = ('id', 'label', 'min', 'max', 'value', 'step')

US_WEEK_DATE_FORMAT = 'dd M, yy'
WEEKEND_DAYS = [0, 6]

_template_env = Environment(
    loader=PackageLoader('param_dashboard.components.parameter_inputs', 'templates'),
    autoescape=select_autoescape(['html']),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _check_id(input_id):
    if not isinstance(input_id, str) or not input_id.strip():
        raise ValueError(f"Input id must be a non-empty string, got {input_id!r}")


def slider_input(input_id, label, min, max, value, step=None):
    """Build a slider descriptor

    Raises ValueError when the id is empty or value lies outside [min, max].
    """
    _check_id(input_id)
    if min > max:
        raise ValueError(f"Slider '{input_id}': min ({min}) is greater than max ({max})")
    if not min <= value <= max:
        raise ValueError(f"Slider '{input_id}': value ({value}) is outside [{min}, {max}]")
    if step is not None and step <= 0:
        raise ValueError(f"Slider '{input_id}': step must be positive, got {step}")

    return {
        'type': 'slider',
        'id': input_id,
        'label': label,
        'min': min,
        'max': max,
        'value': value,
        'step': step,
    }


def parameter_slider(input_id, label=None, min=0, max=1, value=0.5, step=0.1):
    """Slider with the dashboard's shared defaults; label falls back to the id"""
    if label is None:
        label = input_id
    return slider_input(input_id, label, min=min, max=max, value=value, step=step)


def unit_slider(input_id):
    """0-1 slider labelled by its id"""
    return parameter_slider(input_id)


def sliders_for_ids(ids, helper=unit_slider):
    """Apply a one-argument helper to every id, keeping order"""
    return [helper(input_id) for input_id in ids]


def _clean_record(record):
    unknown = set(record) - set(RECORD_FIELDS)
    if unknown:
        raise ValueError(f"Unknown parameter fields: {', '.join(sorted(unknown))}")

    cleaned = {}
    for key, value in record.items():
        # Blank cells in a table mean "use the helper's default"
        if value is None or (isinstance(value, float) and math.isnan(value)):
            continue
        if hasattr(value, 'item'):
            value = value.item()
        cleaned[key] = value

    # A blank id cell counts as missing
    if 'id' not in cleaned:
        raise ValueError("Parameter record is missing 'id'")
    cleaned['input_id'] = cleaned.pop('id')
    return cleaned


def sliders_from_records(records, helper=parameter_slider):
    """Apply helper row-wise, passing each column as a keyword argument

    records may be a list of dicts or a pandas DataFrame.
    """
    if isinstance(records, pd.DataFrame):
        records = records.to_dict(orient='records')

    sliders = []
    for row_number, record in enumerate(records, start=1):
        try:
            sliders.append(helper(**_clean_record(record)))
        except ValueError as e:
            raise ValueError(f"Parameter row {row_number}: {e}") from e
    return sliders


def load_parameter_table(path):
    """Read a CSV parameter table into a list of records"""
    frame = pd.read_csv(path)
    if 'id' not in frame.columns:
        raise ValueError(f"Parameter table {path} has no 'id' column")
    logger.info(f"Loaded {len(frame)} parameters from {path}")
    return frame.to_dict(orient='records')


def us_week_date_input(input_id, label, value=None):
    """Date input limited to weekdays, shown in US format"""
    _check_id(input_id)
    if value is not None and hasattr(value, 'isoformat'):
        value = value.isoformat()
    return {
        'type': 'date',
        'id': input_id,
        'label': label,
        'value': value,
        'format': US_WEEK_DATE_FORMAT,
        'days_of_week_disabled': list(WEEKEND_DAYS),
    }


def fluid_row(*children):
    """Group descriptors into a single layout row"""
    flat = []
    for child in children:
        if isinstance(child, (list, tuple)):
            flat.extend(child)
        else:
            flat.append(child)
    return {'type': 'row', 'children': flat}


def render_inputs(row):
    """Render a row descriptor to HTML"""
    template = _template_env.get_template('parameter_inputs.html')
    return template.render(row=row)


@register_component('parameter_inputs')
class ParameterInputsService:
    """Service for Parameter Inputs component"""

    def __init__(self, config):
        self.config = config

    def get_parameter_records(self):
        """Records from PARAMETER_TABLE when set, otherwise PARAMETERS"""
        table_path = self.config.get('PARAMETER_TABLE')
        if table_path:
            return load_parameter_table(table_path)
        return [dict(record) for record in self.config.get('PARAMETERS', [])]

    def _configured_helper(self, **record):
        defaults = dict(self.config.get('SLIDER_DEFAULTS', {}))
        defaults.update(record)
        return parameter_slider(**defaults)

    def build_sliders(self, records=None):
        """Slider descriptors for records, or the configured table

        Rows that cannot become a slider fail validation, naming the row.
        """
        try:
            if records is None:
                records = self.get_parameter_records()
            return sliders_from_records(records, helper=self._configured_helper)
        except (TypeError, ValueError) as e:
            raise ValidationError(str(e)) from e

    def build_unit_sliders(self, ids):
        return sliders_for_ids(ids)

    def build_date_input(self):
        date_config = self.config.get('DATE_INPUT', {})
        return us_week_date_input(
            date_config.get('id', 'date'),
            date_config.get('label', 'Date'),
            value=date_config.get('value'),
        )

    def build_row(self):
        return fluid_row(self.build_sliders(), self.build_date_input())

    def render_row(self):
        return render_inputs(self.build_row())
