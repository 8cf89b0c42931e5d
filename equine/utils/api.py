# --- equine/utils/api.py ---
from flask import jsonify


def api_ok(message, data=None):
    return {
        "success": True,
        "message": message,
        "data": {**(data or {})},
    }


def api_error(message, data=None):
    return {
        "success": False,
        "message": message,
        "data": {**(data or {})},
    }


# ---- standard API response format ------------------------------------------
def ok(msg, data=None, status=200):
    r = jsonify(api_ok(msg, data)); r.status_code = status; return r
