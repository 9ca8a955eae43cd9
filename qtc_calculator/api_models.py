# qtc_calculator/api_models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List, Literal, Optional, Union


class RawInputs(BaseModel):
    """Inputs as captured from a form, CLI or API request.

    Only the shape is enforced here. Presence, numeric validity and plausibility
    are reported by ``validator.validate_inputs`` so that every problem comes
    back as a readable message.
    """
    model_config = ConfigDict(frozen=True)

    qrs_type: str = Field("narrow", pattern="^(narrow|wide)$", description="QRS width category. Wide rhythms use the Bogossian and Rautaharju wide-QRS formulas.")
    heart_rate_bpm: Optional[float] = Field(None, description="Ventricular rate in beats per minute.")
    qt_interval_ms: Optional[float] = Field(None, description="Measured QT interval in milliseconds.")
    qrs_duration_ms: Optional[float] = Field(None, description="QRS duration in milliseconds. Required for wide QRS.")
    sex: Optional[str] = Field(None, pattern="^(male|female)$", description="Required for the Rautaharju wide-QRS formula.")


class NarrowFormulaValues(BaseModel):
    model_config = ConfigDict(frozen=True)

    bazett: float
    fridericia: float
    framingham: float
    hodges: float
    rautaharju_hr: float


class WideFormulaValues(BaseModel):
    model_config = ConfigDict(frozen=True)

    bogossian_modified_qt: float = Field(..., description="QT minus half the QRS duration. Intermediate value, not a QTc.")
    bogossian_fridericia: float
    rautaharju_wide: float


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: str = Field(..., pattern="^(narrow|wide)$")
    heart_rate_bpm: float
    qt_interval_ms: float
    rr_interval_sec: float
    qrs_duration_ms: Optional[float] = None
    sex: Optional[str] = None
    narrow_values: Optional[NarrowFormulaValues] = None
    wide_values: Optional[WideFormulaValues] = None


class Interpretation(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: str
    notes: List[str] = Field(default_factory=list)


class Flag(BaseModel):
    model_config = ConfigDict(frozen=True)

    severity: str = Field(..., pattern="^(info|warning|danger)$")
    message: str


class QTcReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"
    result: CalculationResult
    interpretation: Interpretation
    flags: List[Flag]


class ValidationFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["invalid"] = "invalid"
    errors: List[str] = Field(..., min_length=1)


QTcOutcome = Annotated[Union[QTcReport, ValidationFailure], Field(discriminator="status")]
