# equine/utils/request.py
from flask import request

from ..errors import ValidationError


def json_object():
    """Request body as a dict; a missing body reads as ``{}``."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("body must be a JSON object")
    return data
