# qtc_calculator/interpretation.py
from typing import List

from .api_models import CalculationResult, Interpretation
from .constants import BORDERLINE_QTC_MS, MARKED_PROLONGATION_QTC_MS
from .formulas import max_qtc

FALLBACK_SUMMARY = "QTc values calculated. Review individual formulas below."

MARKED_SUMMARY = "Marked QTc prolongation (≥500 ms) in at least one formula."
MARKED_NOTES = (
    "QTc ≥500 ms is often associated with increased risk of torsades de pointes; "
    "correlate with symptoms, electrolytes, and medications.",
    "Formulas differ at rate extremes; verify manually and consider repeat ECG.",
)

BORDERLINE_SUMMARY = "QTc is borderline to mildly prolonged in at least one formula."
BORDERLINE_NOTES = (
    "QTc 460-499 ms is often considered borderline to mildly prolonged; "
    "thresholds vary by source and sex.",
    "Consider which formula is preferred by your institution (often Fridericia or Framingham).",
)

NORMAL_SUMMARY = "QTc values fall within conventional ranges for most formulas."
NORMAL_NOTES = (
    "Normal ranges and risk thresholds vary across guidelines; "
    "this tool does not apply sex-specific or age-specific cutoffs.",
)

WIDE_QRS_NOTE = (
    "In wide QRS rhythms, prolonged QT may reflect depolarization rather than repolarization "
    "abnormalities; consider focusing on JT interval and dedicated wide-QRS QTc literature."
)


def interpret_results(result: CalculationResult) -> Interpretation:
    """
    Summarise the highest applicable QTc against the 460/500 ms thresholds.

    Tier notes come first; wide QRS results always get the JT interval note last.
    """
    highest = max_qtc(result)

    summary = FALLBACK_SUMMARY
    notes: List[str] = []

    if highest is not None:
        if highest >= MARKED_PROLONGATION_QTC_MS:
            summary = MARKED_SUMMARY
            notes.extend(MARKED_NOTES)
        elif highest >= BORDERLINE_QTC_MS:
            summary = BORDERLINE_SUMMARY
            notes.extend(BORDERLINE_NOTES)
        else:
            summary = NORMAL_SUMMARY
            notes.extend(NORMAL_NOTES)

    if result.mode == "wide":
        notes.append(WIDE_QRS_NOTE)

    return Interpretation(summary=summary, notes=notes)
