# qtc_calculator/constants.py

# --- Rate Conversion ---
SECONDS_PER_MINUTE = 60.0

# --- QTc Interpretation Thresholds (ms) ---
# Lower bounds are inclusive: 460 is borderline, 500 is marked prolongation.
BORDERLINE_QTC_MS = 460.0
MARKED_PROLONGATION_QTC_MS = 500.0

# --- Heart Rate Ranges (bpm) ---
# Outside this range the inputs are rejected outright.
PLAUSIBLE_HEART_RATE_MIN_BPM = 30.0
PLAUSIBLE_HEART_RATE_MAX_BPM = 140.0
# Outside this range the formulas are flagged as unreliable.
RELIABLE_HEART_RATE_MIN_BPM = 40.0
RELIABLE_HEART_RATE_MAX_BPM = 120.0

# --- Narrow QRS Formula Coefficients ---
FRAMINGHAM_COEFFICIENT_MS = 154.0
HODGES_COEFFICIENT_MS = 1.75
RAUTAHARJU_HR_OFFSET_BPM = 120.0
RAUTAHARJU_HR_DIVISOR = 180.0

# --- Wide QRS Formula Coefficients ---
BOGOSSIAN_QRS_FRACTION = 0.5
RAUTAHARJU_WIDE_RATE_COEFFICIENT_MS = 155.0
RAUTAHARJU_WIDE_QRS_COEFFICIENT = 0.93
RAUTAHARJU_WIDE_QRS_REFERENCE_MS = 139.0
RAUTAHARJU_WIDE_SEX_CONSTANT_MS = {
    "male": -22.0,
    "female": -34.0,
}
