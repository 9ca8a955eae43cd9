# qtc_calculator/flags.py
from typing import List

from .api_models import CalculationResult, Flag
from .constants import (
    BORDERLINE_QTC_MS, MARKED_PROLONGATION_QTC_MS,
    RELIABLE_HEART_RATE_MIN_BPM, RELIABLE_HEART_RATE_MAX_BPM,
)
from .formulas import max_qtc

MARKED_PROLONGATION_MESSAGE = "At least one QTc ≥500 ms. High-risk range; evaluate urgently in clinical context."
BORDERLINE_MESSAGE = "QTc between 460-499 ms in at least one formula. Borderline/mild prolongation."
RATE_EXTREME_MESSAGE = "Heart rate is outside 40-120 bpm; many QTc formulas perform poorly at extremes."
CLINICAL_CORRELATION_MESSAGE = "Use QTc values alongside clinical judgment, medications, electrolytes, and serial ECGs."


def derive_flags(result: CalculationResult) -> List[Flag]:
    flags: List[Flag] = []

    highest = max_qtc(result)
    if highest is not None:
        if highest >= MARKED_PROLONGATION_QTC_MS:
            flags.append(Flag(severity="danger", message=MARKED_PROLONGATION_MESSAGE))
        elif highest >= BORDERLINE_QTC_MS:
            flags.append(Flag(severity="warning", message=BORDERLINE_MESSAGE))

    heart_rate = result.heart_rate_bpm
    if heart_rate < RELIABLE_HEART_RATE_MIN_BPM or heart_rate > RELIABLE_HEART_RATE_MAX_BPM:
        flags.append(Flag(severity="warning", message=RATE_EXTREME_MESSAGE))

    # Always last
    flags.append(Flag(severity="info", message=CLINICAL_CORRELATION_MESSAGE))
    return flags
