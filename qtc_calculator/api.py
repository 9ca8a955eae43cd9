# qtc_calculator/api.py
import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api_models import RawInputs, QTcReport, ValidationFailure
from .calculator import calculate_qtc

logger = logging.getLogger(__name__)

app = FastAPI()

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class InvalidQTcInputs(Exception):
    """Raised when inputs fail validation; rendered as a 422 ValidationFailure payload."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@app.exception_handler(InvalidQTcInputs)
async def invalid_qtc_inputs_handler(request: Request, exc: InvalidQTcInputs):
    logger.info("Rejected %s with %d validation error(s)", request.url.path, len(exc.errors))
    return JSONResponse(status_code=422, content=ValidationFailure(errors=exc.errors).model_dump())


@app.post("/calculate_qtc", response_model=QTcReport)
async def calculate_qtc_endpoint(inputs: RawInputs):
    outcome = calculate_qtc(inputs)
    if isinstance(outcome, ValidationFailure):
        raise InvalidQTcInputs(outcome.errors)
    logger.info("Calculated %s QRS QTc: %s", outcome.result.mode, outcome.interpretation.summary)
    return outcome
