from flask import jsonify

def response(status_code, payload):
    """
    The prediction API returns bare payloads: the record (or list of
    records) on success, {"message", "field"?} on failure.
    """
    return jsonify(payload), status_code

def success(data=None, status_code=200):
    return response(status_code, data)

def error(message="Something went wrong", status_code=400, field=None):
    payload = {"message": message}
    if field is not None:
        payload["field"] = field
    return response(status_code, payload)
