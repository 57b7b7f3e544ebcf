from collections import namedtuple
from decimal import Decimal, InvalidOperation

# Same order the fields are checked in; the first failure wins.
ClinicalInput = namedtuple("ClinicalInput", [
    "age",
    "blood_pressure",
    "specific_gravity",
    "albumin",
    "sugar",
    "blood_urea",
    "serum_creatinine",
    "hemoglobin",
    "hypertension",
    "diabetes_mellitus",
])

SPECIFIC_GRAVITY_VALUES = tuple(
    Decimal(v) for v in ("1.005", "1.010", "1.015", "1.020", "1.025")
)

# Lab values from 1e9 up are rejected
MAX_MEASUREMENT_DIGITS = 9

# "on" is what a checked HTML checkbox sends
BOOLEAN_STRINGS = {"true": True, "false": False, "on": True}


class ValidationError(Exception):
    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field


def _type_name(value):
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _to_decimal(value, field):
    """Coerce JSON numbers and numeric strings to Decimal."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("Required", field)
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError(f"Expected number, received {_type_name(value)}", field)

    # str() on a float gives its shortest repr, so 1.02 stays 1.02
    raw = value.strip() if isinstance(value, str) else str(value)
    try:
        number = Decimal(raw)
    except InvalidOperation:
        raise ValidationError("Expected number, received string", field)
    if number.is_nan():
        raise ValidationError("Expected number, received nan", field)
    if number.is_infinite():
        raise ValidationError("Expected number, received infinity", field)
    return number


def _to_int(value, field, minimum, maximum, min_message=None, max_message=None):
    # Range first: int() on "1e30000000" would build a 30-million digit number
    number = _check_range(
        _to_decimal(value, field), field, minimum, maximum, min_message, max_message
    )
    if number != number.to_integral_value():
        raise ValidationError("Expected integer, received float", field)
    return int(number)


def _to_measurement(value, field):
    """Non-negative lab value, kept as the exact Decimal given."""
    number = _check_range(_to_decimal(value, field), field, 0)
    if number.adjusted() >= MAX_MEASUREMENT_DIGITS:
        raise ValidationError(
            f"Number must be less than 1e{MAX_MEASUREMENT_DIGITS}", field
        )
    return number


def _to_bool(value, field):
    if value is None or value == "":
        raise ValidationError("Required", field)
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in BOOLEAN_STRINGS:
        return BOOLEAN_STRINGS[value.strip().lower()]
    raise ValidationError(f"Expected boolean, received {_type_name(value)}", field)


def _check_range(number, field, minimum=None, maximum=None, min_message=None, max_message=None):
    if minimum is not None and number < minimum:
        raise ValidationError(
            min_message or f"Number must be greater than or equal to {minimum}", field
        )
    if maximum is not None and number > maximum:
        raise ValidationError(
            max_message or f"Number must be less than or equal to {maximum}", field
        )
    return number


def _specific_gravity(value, field):
    number = _to_decimal(value, field)
    if number not in SPECIFIC_GRAVITY_VALUES:
        allowed = ", ".join(str(v) for v in SPECIFIC_GRAVITY_VALUES)
        raise ValidationError(f"Specific gravity must be one of {allowed}", field)
    # 1.02 and "1.020" are the same reading, keep the 3-digit form
    return number.quantize(Decimal("0.001"))


# (json key, parser)
FIELD_RULES = (
    ("age", lambda v, f: _to_int(
        v, f, 1, 120,
        min_message="Age must be valid", max_message="Age must be realistic")),
    ("bloodPressure", lambda v, f: _to_int(v, f, 50, 250)),
    ("specificGravity", _specific_gravity),
    ("albumin", lambda v, f: _to_int(v, f, 0, 5)),
    ("sugar", lambda v, f: _to_int(v, f, 0, 5)),
    ("bloodUrea", _to_measurement),
    ("serumCreatinine", _to_measurement),
    ("hemoglobin", _to_measurement),
    ("hypertension", _to_bool),
    ("diabetesMellitus", _to_bool),
)

BOOLEAN_FIELDS = ("hypertension", "diabetesMellitus")


def from_form(form):
    """
    Read an HTML form submission. Checked boxes arrive as "on" and
    unchecked ones are left out of the form entirely, so a missing
    checkbox means false.
    """
    data = form.to_dict()
    for key in BOOLEAN_FIELDS:
        data.setdefault(key, "false")
    return data


def validate_clinical_input(data, prefix=""):
    """
    Turn a raw request body into a ClinicalInput.

    Raises ValidationError for the first field that fails, in FIELD_RULES
    order. ``prefix`` is prepended to the reported field path when the
    input is nested inside a larger document.
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Expected object, received {_type_name(data)}", prefix.rstrip(".") or None
        )

    values = []
    for key, parse in FIELD_RULES:
        values.append(parse(data.get(key), f"{prefix}{key}"))
    return ClinicalInput(*values)
