# qtc_calculator/calculator.py
import logging
from typing import Any, Mapping, Union

from pydantic import ValidationError

from .api_models import RawInputs, QTcReport, ValidationFailure
from .flags import derive_flags
from .formulas import perform_calculations
from .interpretation import interpret_results
from .validator import describe_model_errors, normalize_field_values, validate_inputs

logger = logging.getLogger(__name__)


def calculate_qtc(inputs: Union[RawInputs, Mapping[str, Any]]) -> Union[QTcReport, ValidationFailure]:
    """
    Validate the inputs and, only if they pass, run the formulas, interpretation and flags.

    Args:
        inputs: RawInputs, or a mapping of its fields as a form would submit them

    Returns:
        QTcReport on success, ValidationFailure carrying every error message otherwise
    """
    if not isinstance(inputs, RawInputs):
        try:
            inputs = RawInputs.model_validate(normalize_field_values(inputs))
        except ValidationError as exc:
            errors = describe_model_errors(exc)
            logger.debug("Rejected malformed inputs with %d error(s): %s", len(errors), errors)
            return ValidationFailure(errors=errors)

    errors = validate_inputs(inputs)
    if errors:
        logger.debug("Rejected %s QRS inputs with %d error(s): %s", inputs.qrs_type, len(errors), errors)
        return ValidationFailure(errors=errors)

    result = perform_calculations(inputs)
    interpretation = interpret_results(result)
    flags = derive_flags(result)

    logger.debug("Calculated %s QRS QTc at %.1f bpm: %s", result.mode, result.heart_rate_bpm, interpretation.summary)
    return QTcReport(result=result, interpretation=interpretation, flags=flags)
