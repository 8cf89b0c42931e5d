import hmac

from flask import current_app
from flask_jwt_extended import create_access_token

from ..config import DEFAULT_ADMIN_PASSWORD
from ..errors import UnauthorizedError, ValidationError

ADMIN_IDENTITY = "admin"
ADMIN_ROLE = "admin"


def check_password(submitted) -> bool:
    """Exact, constant-time match against the configured admin password."""
    expected = current_app.config.get("ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD
    if not isinstance(submitted, str):
        return False
    return hmac.compare_digest(submitted.encode("utf-8"), expected.encode("utf-8"))


def issue_admin_token():
    expires = current_app.config["ADMIN_TOKEN_EXPIRES"]
    token = create_access_token(
        identity=ADMIN_IDENTITY,
        additional_claims={"role": ADMIN_ROLE},
        expires_delta=expires,
    )
    return token, int(expires.total_seconds())


def login(password):
    if password is None or password == "":
        raise ValidationError("password is required")
    if not check_password(password):
        current_app.logger.warning("admin login rejected")
        raise UnauthorizedError("Invalid password")
    return issue_admin_token()
