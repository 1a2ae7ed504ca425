"""
Input parsing and loading module.
Handles lenient numeric parsing, defaults, settings validation and audit trail.
"""

import json
import math
from typing import Dict, Any, List, NamedTuple, Tuple
from copy import deepcopy

from .efficiency import DEFAULT_INTERVALS


PLANT_FIELDS = ('power_mw', 'initial_deviation_mw', 'improved_deviation_mw', 'rate_per_kwh')

DEFAULT_CURRENCY_LABEL = "thousand UAH"
DEFAULT_SENSITIVITY_STEPS = 11

# Non-finite spellings accepted in text, case-sensitive
SPECIAL_FLOAT_NAMES = ('NaN', 'Infinity')


class ParsedValue(NamedTuple):
    """Result of parsing one raw form value."""
    value: float
    defaulted: bool


def parse_float(raw: Any) -> ParsedValue:
    """
    Parse a raw form value as a float, falling back to 0.0.

    Numbers are taken as-is; integers too large for a float become a signed
    infinity. Text goes through float() after two extra checks: underscores
    are rejected, and the only non-finite spellings allowed are "NaN" and
    "Infinity" (optionally signed), so "1_000", "inf" and "nan" default to
    zero. Anything else (None, booleans, containers, malformed text) becomes
    a defaulted zero.
    """
    if isinstance(raw, bool) or raw is None:
        return ParsedValue(0.0, True)

    if isinstance(raw, (int, float)):
        try:
            return ParsedValue(float(raw), False)
        except OverflowError:
            return ParsedValue(math.inf if raw > 0 else -math.inf, False)

    if isinstance(raw, str):
        text = raw.strip()
        if '_' in text:
            return ParsedValue(0.0, True)

        unsigned = text.lstrip('+-')
        if unsigned.isalpha() and unsigned not in SPECIAL_FLOAT_NAMES:
            return ParsedValue(0.0, True)

        try:
            return ParsedValue(float(raw), False)
        except ValueError:
            return ParsedValue(0.0, True)

    return ParsedValue(0.0, True)


class InputParser:
    """Parses plant inputs and settings with defaults and audit tracking."""

    def __init__(self):
        self.defaults_used = []
        self.validation_errors = []
        self.warnings = []

    def load_and_parse(self, json_path: str) -> Dict[str, Any]:
        """Load JSON and parse it with defaults."""
        with open(json_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError("Input validation failed: ['top-level JSON value must be an object']")

        return self.parse(data)

    def parse(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Parse an in-memory inputs dict."""
        result = deepcopy(data)

        if not isinstance(result.get('plant'), dict):
            result['plant'] = {}
        self._parse_plant(result['plant'])

        if not isinstance(result.get('settings'), dict):
            result['settings'] = {}
        self._apply_setting_defaults(result['settings'])
        self._validate_settings(result['settings'])

        if self.validation_errors:
            raise ValueError(f"Input validation failed: {self.validation_errors}")

        return result

    def _parse_plant(self, plant: Dict[str, Any]):
        """Replace raw plant values with floats, defaulting unparsable ones to zero."""
        for key in PLANT_FIELDS:
            raw = plant.get(key)
            parsed = parse_float(raw)
            plant[key] = parsed.value

            if parsed.defaulted:
                self.defaults_used.append(f"plant.{key} = {parsed.value}")
                if raw is not None:
                    self.warnings.append(f"plant.{key}: could not parse {raw!r}, using 0.0")

    def _apply_setting_defaults(self, settings: Dict[str, Any]):
        self._set_default(settings, 'intervals', DEFAULT_INTERVALS, 'settings.intervals')
        self._set_default(settings, 'currency_label', DEFAULT_CURRENCY_LABEL, 'settings.currency_label')
        self._set_default(settings, 'sensitivity_steps', DEFAULT_SENSITIVITY_STEPS, 'settings.sensitivity_steps')

    def _set_default(self, section: Dict, key: str, default: Any, path: str):
        """Set a default value and track it."""
        if key not in section or section[key] is None:
            section[key] = default
            self.defaults_used.append(f"{path} = {default}")

    def _validate_settings(self, settings: Dict[str, Any]):
        """Validate settings constraints."""
        intervals = settings['intervals']
        if isinstance(intervals, bool) or not isinstance(intervals, int) or intervals <= 0:
            self.validation_errors.append(f"settings.intervals must be a positive integer, got {intervals!r}")

        label = settings['currency_label']
        if not isinstance(label, str) or not label.strip():
            self.validation_errors.append("settings.currency_label must be a non-empty string")

        steps = settings['sensitivity_steps']
        if isinstance(steps, bool) or not isinstance(steps, int) or steps < 0:
            self.validation_errors.append(f"settings.sensitivity_steps must be an integer >= 0, got {steps!r}")


def parse_form(raw: Dict[str, Any]) -> Tuple[Dict[str, float], List[str]]:
    """
    Parse the four plant fields of a form.

    Args:
        raw: Mapping of field name to raw (usually text) value

    Returns:
        (plant_values, defaulted_fields)
    """
    plant = {}
    defaulted = []

    for key in PLANT_FIELDS:
        parsed = parse_float(raw.get(key))
        plant[key] = parsed.value
        if parsed.defaulted:
            defaulted.append(key)

    return plant, defaulted


def load_inputs(json_path: str) -> Tuple[Dict[str, Any], List[str], List[str]]:
    """
    Load and parse inputs from JSON file.

    Returns:
        (parsed_data, defaults_used, warnings)
    """
    parser = InputParser()
    data = parser.load_and_parse(json_path)
    return data, parser.defaults_used, parser.warnings
