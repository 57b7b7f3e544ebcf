from collections import namedtuple
from decimal import Decimal, ROUND_HALF_UP

# --- KEBIJAKAN SKOR RISIKO CKD ---
# Fixed heuristic, not a trained model. Bump POLICY_VERSION whenever a
# weight or threshold below changes.
POLICY_VERSION = "1"

LABEL_CKD = "Chronic Kidney Disease"
LABEL_HEALTHY = "Healthy"

CREATININE_LIMIT = Decimal("1.2")   # mg/dL, above -> risk
HEMOGLOBIN_LIMIT = Decimal("13")    # g/dL, below -> anemia
SPECIFIC_GRAVITY_LIMIT = Decimal("1.015")

WEIGHTS = {
    "serumCreatinine": 3,
    "albuminPresent": 2,
    "albuminHigh": 1,      # albumin > 2, on top of albuminPresent
    "hemoglobinLow": 2,
    "diabetesMellitus": 2,
    "hypertension": 1,
    "specificGravityLow": 1,
}

CKD_THRESHOLD = 4
CKD_BASE_CONFIDENCE = Decimal("0.60")
HEALTHY_BASE_CONFIDENCE = Decimal("0.70")
CONFIDENCE_STEP = Decimal("0.05")
MAX_CONFIDENCE = Decimal("0.99")

Score = namedtuple("Score", ["label", "confidence"])


def calculate_risk_score(data):
    risk_score = 0

    if data.serum_creatinine > CREATININE_LIMIT:
        risk_score += WEIGHTS["serumCreatinine"]

    # Cumulative: albumin 3 adds 2 + 1
    if data.albumin > 0:
        risk_score += WEIGHTS["albuminPresent"]
    if data.albumin > 2:
        risk_score += WEIGHTS["albuminHigh"]

    if data.hemoglobin < HEMOGLOBIN_LIMIT:
        risk_score += WEIGHTS["hemoglobinLow"]

    if data.diabetes_mellitus:
        risk_score += WEIGHTS["diabetesMellitus"]

    if data.hypertension:
        risk_score += WEIGHTS["hypertension"]

    if data.specific_gravity < SPECIFIC_GRAVITY_LIMIT:
        risk_score += WEIGHTS["specificGravityLow"]

    return risk_score


def classify(risk_score):
    """Map an additive risk score to (label, confidence).

    Confidence is clamped to MAX_CONFIDENCE and rounded half-up to two
    decimal places.
    """
    if risk_score >= CKD_THRESHOLD:
        label = LABEL_CKD
        confidence = CKD_BASE_CONFIDENCE + risk_score * CONFIDENCE_STEP
    else:
        label = LABEL_HEALTHY
        confidence = HEALTHY_BASE_CONFIDENCE + (CKD_THRESHOLD - risk_score) * CONFIDENCE_STEP

    confidence = min(confidence, MAX_CONFIDENCE)
    return Score(label, confidence.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def score(data):
    """Classify a validated ClinicalInput. Pure and deterministic."""
    return classify(calculate_risk_score(data))


def describe_policy():
    return {
        "version": POLICY_VERSION,
        "labels": [LABEL_CKD, LABEL_HEALTHY],
        "thresholds": {
            "serumCreatinine": str(CREATININE_LIMIT),
            "hemoglobin": str(HEMOGLOBIN_LIMIT),
            "specificGravity": str(SPECIFIC_GRAVITY_LIMIT),
            "ckdRiskScore": CKD_THRESHOLD,
        },
        "weights": dict(WEIGHTS),
        "confidence": {
            "ckdBase": str(CKD_BASE_CONFIDENCE),
            "healthyBase": str(HEALTHY_BASE_CONFIDENCE),
            "step": str(CONFIDENCE_STEP),
            "max": str(MAX_CONFIDENCE),
        },
    }
