# qtc_calculator/report.py
import math
from typing import List, Optional, Sequence, Tuple

from .api_models import CalculationResult, QTcReport
from .constants import BORDERLINE_QTC_MS, MARKED_PROLONGATION_QTC_MS

MEASUREMENT_FOOTER = (
    "Formulas assume accurate manual measurement of QT and a representative RR interval. "
    "Automation and rate extremes may introduce error."
)

SEVERITY_PREFIX = {
    "danger": "[DANGER]",
    "warning": "[WARNING]",
    "info": "[INFO]",
}


def format_number(value: Optional[float], decimals: int = 2) -> str:
    if value is None or math.isnan(value):
        return "—"
    return f"{value:.{decimals}f}"


def qtc_range_level(qtc_ms: Optional[float]) -> Optional[str]:
    """Severity used to highlight a single QTc value: "danger", "warning" or None."""
    if qtc_ms is None or math.isnan(qtc_ms):
        return None
    if qtc_ms >= MARKED_PROLONGATION_QTC_MS:
        return "danger"
    if qtc_ms >= BORDERLINE_QTC_MS:
        return "warning"
    return None


def formula_rows(result: CalculationResult) -> List[Tuple[str, float, Optional[str]]]:
    """(label, value_ms, range_level) for each computed formula, in display order."""
    if result.mode == "narrow" and result.narrow_values is not None:
        values = result.narrow_values
        rows = [
            ("Bazett", values.bazett),
            ("Fridericia", values.fridericia),
            ("Framingham", values.framingham),
            ("Hodges", values.hodges),
            ("Rautaharju (HR)", values.rautaharju_hr),
        ]
        return [(label, value, qtc_range_level(value)) for label, value in rows]

    if result.mode == "wide" and result.wide_values is not None:
        values = result.wide_values
        return [
            # Modified QT is an intermediate, never highlighted
            ("Bogossian modified QT", values.bogossian_modified_qt, None),
            ("Bogossian + Fridericia QTc", values.bogossian_fridericia, qtc_range_level(values.bogossian_fridericia)),
            ("Rautaharju wide-QRS QTc", values.rautaharju_wide, qtc_range_level(values.rautaharju_wide)),
        ]
    return []


def render_errors(errors: Sequence[str]) -> str:
    lines = ["Check your inputs"]
    lines.extend(f"  - {error}" for error in errors)
    return "\n".join(lines)


def render_report(report: QTcReport) -> str:
    result = report.result
    rr_ms = result.rr_interval_sec * 1000.0

    lines = ["Input Summary"]
    lines.append(f"  Mode: {'Narrow QRS' if result.mode == 'narrow' else 'Wide QRS'}")
    lines.append(f"  Heart Rate: {format_number(result.heart_rate_bpm, 0)} bpm")
    lines.append(f"  RR Interval: {format_number(rr_ms, 0)} ms ({format_number(result.rr_interval_sec, 3)} s)")
    lines.append(f"  QT Interval: {format_number(result.qt_interval_ms, 0)} ms")
    if result.mode == "wide":
        lines.append(f"  QRS Duration: {format_number(result.qrs_duration_ms, 0)} ms")

    lines.append("")
    lines.append("QTc Values")
    for label, value, level in formula_rows(result):
        marker = f" {SEVERITY_PREFIX[level]}" if level else ""
        lines.append(f"  {label}: {format_number(value, 0)} ms{marker}")

    lines.append("")
    lines.append("Interpretation")
    lines.append(f"  {report.interpretation.summary}")
    lines.extend(f"  - {note}" for note in report.interpretation.notes)
    lines.append(f"  {MEASUREMENT_FOOTER}")

    lines.append("")
    lines.append("Flags")
    if report.flags:
        lines.extend(f"  {SEVERITY_PREFIX[flag.severity]} {flag.message}" for flag in report.flags)
    else:
        lines.append("  No critical flags based on the provided values. Always correlate clinically.")

    return "\n".join(lines)
