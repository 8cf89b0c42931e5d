# ------- equine/utils/decorators.py -------
from functools import wraps
from flask_jwt_extended import get_jwt, verify_jwt_in_request

from ..errors import UnauthorizedError
from ..services.admin_gate import ADMIN_ROLE


def admin_required(fn):
    """Require a valid, unexpired admin JWT in the Authorization header."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        if get_jwt().get("role") != ADMIN_ROLE:
            raise UnauthorizedError("Unauthorized")
        return fn(*args, **kwargs)
    return wrapper
