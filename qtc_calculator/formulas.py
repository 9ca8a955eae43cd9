# qtc_calculator/formulas.py
import numpy as np
from typing import List, Optional

from .api_models import CalculationResult, NarrowFormulaValues, RawInputs, WideFormulaValues
from .constants import (
    SECONDS_PER_MINUTE,
    FRAMINGHAM_COEFFICIENT_MS, HODGES_COEFFICIENT_MS,
    RAUTAHARJU_HR_OFFSET_BPM, RAUTAHARJU_HR_DIVISOR,
    BOGOSSIAN_QRS_FRACTION,
    RAUTAHARJU_WIDE_RATE_COEFFICIENT_MS, RAUTAHARJU_WIDE_QRS_COEFFICIENT,
    RAUTAHARJU_WIDE_QRS_REFERENCE_MS, RAUTAHARJU_WIDE_SEX_CONSTANT_MS,
)

# All formulas take QT/QRS in ms, RR in seconds and HR in bpm, and return ms.
# Inputs are assumed to have passed validator.validate_inputs; nothing is rounded here.


def rr_interval_from_heart_rate(heart_rate_bpm: float) -> float:
    return SECONDS_PER_MINUTE / heart_rate_bpm


# --- Narrow QRS ---

def qtc_bazett(qt_ms: float, rr_sec: float) -> float:
    """QTc = QT / √(RR)"""
    return float(qt_ms / np.sqrt(rr_sec))


def qtc_fridericia(qt_ms: float, rr_sec: float) -> float:
    """QTc = QT / ∛(RR)"""
    return float(qt_ms / np.cbrt(rr_sec))


def qtc_framingham(qt_ms: float, rr_sec: float) -> float:
    """QTc = QT + 154 × (1 - RR)"""
    return float(qt_ms + FRAMINGHAM_COEFFICIENT_MS * (1.0 - rr_sec))


def qtc_hodges(qt_ms: float, rr_sec: float) -> float:
    """QTc = QT + 1.75 × (60/RR - 60)"""
    return float(qt_ms + HODGES_COEFFICIENT_MS * ((SECONDS_PER_MINUTE / rr_sec) - SECONDS_PER_MINUTE))


def qtc_rautaharju_hr(qt_ms: float, heart_rate_bpm: float) -> float:
    """QTc = QT × (120 + HR) / 180"""
    return float(qt_ms * (RAUTAHARJU_HR_OFFSET_BPM + heart_rate_bpm) / RAUTAHARJU_HR_DIVISOR)


def calculate_narrow_qtc(heart_rate_bpm: float, qt_ms: float, rr_sec: float) -> NarrowFormulaValues:
    return NarrowFormulaValues(
        bazett=qtc_bazett(qt_ms, rr_sec),
        fridericia=qtc_fridericia(qt_ms, rr_sec),
        framingham=qtc_framingham(qt_ms, rr_sec),
        hodges=qtc_hodges(qt_ms, rr_sec),
        rautaharju_hr=qtc_rautaharju_hr(qt_ms, heart_rate_bpm),
    )


# --- Wide QRS ---

def bogossian_modified_qt(qt_ms: float, qrs_ms: float) -> float:
    """QTmod = QT - 0.5 × QRS"""
    return float(qt_ms - BOGOSSIAN_QRS_FRACTION * qrs_ms)


def rautaharju_sex_constant(sex: Optional[str]) -> float:
    """
    Sex constant k of the Rautaharju wide-QRS formula.

    Only "male" selects the male constant; every other value, including an
    unexpected one, falls back to the female constant.
    """
    if sex == "male":
        return RAUTAHARJU_WIDE_SEX_CONSTANT_MS["male"]
    return RAUTAHARJU_WIDE_SEX_CONSTANT_MS["female"]


def qtc_rautaharju_wide(qt_ms: float, heart_rate_bpm: float, qrs_ms: float, sex: Optional[str]) -> float:
    """QTc = QT - 155 × (60/HR - 1) - 0.93 × (QRS - 139) + k"""
    rate_term = SECONDS_PER_MINUTE / heart_rate_bpm - 1.0
    qrs_term = qrs_ms - RAUTAHARJU_WIDE_QRS_REFERENCE_MS
    return float(
        qt_ms
        - RAUTAHARJU_WIDE_RATE_COEFFICIENT_MS * rate_term
        - RAUTAHARJU_WIDE_QRS_COEFFICIENT * qrs_term
        + rautaharju_sex_constant(sex)
    )


def calculate_wide_qtc(heart_rate_bpm: float, qt_ms: float, qrs_ms: float, sex: Optional[str], rr_sec: float) -> WideFormulaValues:
    modified_qt = bogossian_modified_qt(qt_ms, qrs_ms)
    return WideFormulaValues(
        bogossian_modified_qt=modified_qt,
        # Fridericia applied to the Bogossian-modified QT
        bogossian_fridericia=qtc_fridericia(modified_qt, rr_sec),
        rautaharju_wide=qtc_rautaharju_wide(qt_ms, heart_rate_bpm, qrs_ms, sex),
    )


# --- Combined ---

def perform_calculations(inputs: RawInputs) -> CalculationResult:
    """
    Compute every QTc formula applicable to the QRS type.

    Args:
        inputs: Raw inputs that produced no validation errors

    Returns:
        CalculationResult with narrow_values or wide_values populated, never both
    """
    heart_rate = float(inputs.heart_rate_bpm)
    qt_ms = float(inputs.qt_interval_ms)
    rr_sec = rr_interval_from_heart_rate(heart_rate)

    if inputs.qrs_type == "wide":
        qrs_ms = float(inputs.qrs_duration_ms)
        return CalculationResult(
            mode="wide",
            heart_rate_bpm=heart_rate,
            qt_interval_ms=qt_ms,
            rr_interval_sec=rr_sec,
            qrs_duration_ms=qrs_ms,
            sex=inputs.sex,
            wide_values=calculate_wide_qtc(heart_rate, qt_ms, qrs_ms, inputs.sex, rr_sec),
        )

    return CalculationResult(
        mode="narrow",
        heart_rate_bpm=heart_rate,
        qt_interval_ms=qt_ms,
        rr_interval_sec=rr_sec,
        narrow_values=calculate_narrow_qtc(heart_rate, qt_ms, rr_sec),
    )


def collect_qtc_values(result: CalculationResult) -> List[float]:
    """QTc values used for interpretation. The Bogossian modified QT is not a QTc and is left out."""
    if result.mode == "narrow" and result.narrow_values is not None:
        values = result.narrow_values
        return [values.bazett, values.fridericia, values.framingham, values.hodges, values.rautaharju_hr]
    if result.mode == "wide" and result.wide_values is not None:
        values = result.wide_values
        return [values.bogossian_fridericia, values.rautaharju_wide]
    return []


def max_qtc(result: CalculationResult) -> Optional[float]:
    """Largest applicable QTc, shared by interpretation and flag derivation. None when nothing was computed."""
    qtc_values = collect_qtc_values(result)
    return max(qtc_values) if qtc_values else None
