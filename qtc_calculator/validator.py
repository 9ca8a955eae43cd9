# qtc_calculator/validator.py
import math
import numbers
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from .api_models import RawInputs
from .constants import PLAUSIBLE_HEART_RATE_MIN_BPM, PLAUSIBLE_HEART_RATE_MAX_BPM

NUMERIC_FIELDS = ("heart_rate_bpm", "qt_interval_ms", "qrs_duration_ms")

FIELD_LABELS = {
    "qrs_type": "QRS type",
    "heart_rate_bpm": "Heart rate",
    "qt_interval_ms": "QT interval",
    "qrs_duration_ms": "QRS duration",
    "sex": "Sex",
}


def is_valid_number(value: Any) -> bool:
    """True for finite real numbers. None, NaN, infinities and booleans are rejected."""
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def coerce_number(raw: Any) -> Optional[float]:
    """
    Coerce a field value the way a form does.

    None and blank text become None (missing). Text that does not parse, booleans
    and other non-numeric values become NaN, which validate_inputs reports.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return float("nan")
    if isinstance(raw, bool) or not isinstance(raw, numbers.Real):
        return float("nan")
    return float(raw)


def normalize_field_values(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Prepare a plain mapping for RawInputs: coerce numbers, and treat a blank sex as missing."""
    values = dict(raw)
    for name in NUMERIC_FIELDS:
        if name in values:
            values[name] = coerce_number(values[name])
    sex = values.get("sex")
    if isinstance(sex, str) and not sex.strip():
        values["sex"] = None
    return values


def describe_model_errors(exc: ValidationError) -> List[str]:
    """One readable message per field that RawInputs refused."""
    messages = []
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "input"
        label = FIELD_LABELS.get(field, field)
        if field == "qrs_type":
            messages.append(f"{label} must be 'narrow' or 'wide'.")
        elif field == "sex":
            messages.append(f"{label} must be 'male' or 'female'.")
        else:
            messages.append(f"{label}: {error['msg']}.")
    return messages


def _check_positive_measurement(value: Any, missing_message: str, non_positive_message: str, errors: List[str]) -> None:
    if not is_valid_number(value):
        errors.append(missing_message)
    elif value <= 0:
        errors.append(non_positive_message)


def validate_inputs(inputs: RawInputs) -> List[str]:
    """
    Check raw inputs before any QTc formula runs.

    Rules are applied in a fixed order and every failing rule contributes one
    message. The heart rate plausibility check (30-140 bpm) blocks calculation
    like any other error.

    Args:
        inputs: Raw inputs as captured by the caller

    Returns:
        Ordered list of error messages. Empty when the inputs are acceptable.
    """
    errors: List[str] = []

    _check_positive_measurement(
        inputs.heart_rate_bpm,
        "Heart rate is required and must be a number (bpm).",
        "Heart rate must be greater than 0 bpm.",
        errors,
    )
    _check_positive_measurement(
        inputs.qt_interval_ms,
        "QT interval is required and must be a number (ms).",
        "QT interval must be greater than 0 ms.",
        errors,
    )

    if inputs.qrs_type == "wide":
        _check_positive_measurement(
            inputs.qrs_duration_ms,
            "QRS duration is required and must be a number (ms) for wide QRS.",
            "QRS duration must be greater than 0 ms.",
            errors,
        )
        if not inputs.sex:
            errors.append("Sex is required for the Rautaharju wide-QRS calculation.")

    heart_rate = inputs.heart_rate_bpm
    if is_valid_number(heart_rate) and heart_rate > 0:
        if heart_rate < PLAUSIBLE_HEART_RATE_MIN_BPM or heart_rate > PLAUSIBLE_HEART_RATE_MAX_BPM:
            errors.append(
                "Heart rate is outside typical validation ranges for many QTc formulas "
                f"(<{PLAUSIBLE_HEART_RATE_MIN_BPM:.0f} or >{PLAUSIBLE_HEART_RATE_MAX_BPM:.0f} bpm). "
                "Interpret with extra caution."
            )

    return errors
