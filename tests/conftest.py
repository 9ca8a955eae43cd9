"""
Pytest configuration and shared fixtures for QTc calculator tests.
"""
import pytest
from qtc_calculator.api_models import (
    RawInputs, CalculationResult, NarrowFormulaValues, WideFormulaValues
)

@pytest.fixture
def narrow_60bpm_inputs():
    """Narrow QRS at 60 bpm, where every formula converges on the measured QT."""
    return RawInputs(qrs_type="narrow", heart_rate_bpm=60, qt_interval_ms=400)

@pytest.fixture
def narrow_borderline_inputs():
    """Narrow QRS at 100 bpm; Bazett lands in the borderline range."""
    return RawInputs(qrs_type="narrow", heart_rate_bpm=100, qt_interval_ms=380)

@pytest.fixture
def wide_male_inputs():
    """Wide QRS, male; Rautaharju wide-QRS QTc lands in the borderline range."""
    return RawInputs(
        qrs_type="wide",
        heart_rate_bpm=90,
        qt_interval_ms=460,
        qrs_duration_ms=160,
        sex="male"
    )

@pytest.fixture
def make_narrow_result():
    """Build a narrow CalculationResult with all five QTc values set to chosen numbers."""
    def _make(max_value, others=400.0, heart_rate_bpm=60.0):
        return CalculationResult(
            mode="narrow",
            heart_rate_bpm=heart_rate_bpm,
            qt_interval_ms=400.0,
            rr_interval_sec=60.0 / heart_rate_bpm,
            narrow_values=NarrowFormulaValues(
                bazett=max_value,
                fridericia=others,
                framingham=others,
                hodges=others,
                rautaharju_hr=others
            )
        )
    return _make

@pytest.fixture
def make_wide_result():
    """Build a wide CalculationResult with chosen formula values."""
    def _make(bogossian_fridericia, rautaharju_wide, modified_qt=380.0, heart_rate_bpm=80.0):
        return CalculationResult(
            mode="wide",
            heart_rate_bpm=heart_rate_bpm,
            qt_interval_ms=460.0,
            rr_interval_sec=60.0 / heart_rate_bpm,
            qrs_duration_ms=160.0,
            sex="female",
            wide_values=WideFormulaValues(
                bogossian_modified_qt=modified_qt,
                bogossian_fridericia=bogossian_fridericia,
                rautaharju_wide=rautaharju_wide
            )
        )
    return _make

@pytest.fixture
def tolerance_config():
    """Standard tolerance values for numerical comparisons."""
    return {
        'qtc_tolerance_ms': 0.1,
        'rr_tolerance_sec': 1e-9,
    }
