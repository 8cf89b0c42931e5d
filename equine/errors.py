# equine/errors.py
from flask import jsonify
from werkzeug.exceptions import RequestEntityTooLarge

from .utils.api import api_error


class EquineError(Exception):
    status_code = 500

    def __init__(self, message, data=None):
        super().__init__(message)
        self.message = message
        self.data = data


class ValidationError(EquineError):
    status_code = 400


class UnauthorizedError(EquineError):
    status_code = 401


class NotFound(EquineError):
    status_code = 404


class PersistenceError(EquineError):
    """The store rejected a read or write (constraint violation, outage, ...)."""
    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(EquineError)
    def handle_equine_error(e):
        r = jsonify(api_error(e.message, e.data))
        r.status_code = e.status_code
        return r

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(e):
        limit = app.config.get("MAX_CONTENT_LENGTH")
        r = jsonify(api_error(f"upload exceeds {limit} bytes"))
        r.status_code = 413
        return r


def register_jwt_handlers(jwt):
    def _unauthorized(message):
        r = jsonify(api_error(message))
        r.status_code = 401
        return r

    @jwt.unauthorized_loader
    def missing_token(reason):
        return _unauthorized(f"Unauthorized: {reason}")

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return _unauthorized(f"Invalid token: {reason}")

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return _unauthorized("Token has expired")
