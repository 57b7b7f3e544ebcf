from flask import Blueprint, request, current_app

from app.services.scoring import score, describe_policy
from app.services.validation import validate_clinical_input, from_form, ValidationError
from app.utils.response import success, error

prediction_bp = Blueprint('predictions', __name__, url_prefix='/api/predictions')


def get_store():
    return current_app.extensions['prediction_store']


def _request_payload():
    # JSON body from the API client, form fields from a plain HTML form
    if request.is_json:
        return request.get_json(silent=True)
    if request.form:
        return from_form(request.form)
    return request.get_json(force=True, silent=True)


# --- ENDPOINT UTAMA ---
@prediction_bp.route('', methods=['POST'])
def create_prediction():
    """
    POST /api/predictions
    Body JSON:
    {
      "age": 45, "bloodPressure": 80, "specificGravity": 1.020,
      "albumin": 0, "sugar": 0, "bloodUrea": 36, "serumCreatinine": 1.2,
      "hemoglobin": 15.4, "hypertension": false, "diabetesMellitus": false
    }
    """
    # 1. VALIDASI
    try:
        clinical_input = validate_clinical_input(_request_payload())
    except ValidationError as e:
        current_app.logger.info("Prediction rejected: %s (%s)", e.message, e.field)
        return error(e.message, 400, field=e.field)

    # 2. SKOR
    label, confidence = score(clinical_input)

    # 3. SIMPAN (PersistenceError is turned into a 500 by the app handler)
    record = get_store().create(clinical_input, label, confidence)
    current_app.logger.info(
        "Prediction %s stored: %s (%s)", record.id, record.prediction, record.confidence
    )

    return success(record.to_dict(), 201)


@prediction_bp.route('', methods=['GET'])
def list_predictions():
    """GET /api/predictions -> every record, newest first."""
    records = get_store().list()
    return success([r.to_dict() for r in records])


@prediction_bp.route('/policy', methods=['GET'])
def get_policy():
    return success(describe_policy())
