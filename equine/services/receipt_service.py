import os

from flask import current_app, url_for
from werkzeug.utils import secure_filename

from ..errors import PersistenceError, ValidationError
from ..model import utcnow
from . import order_service


def _allowed_extensions():
    return {e.lower() if e.startswith(".") else f".{e.lower()}"
            for e in current_app.config.get("RECEIPT_EXTENSIONS", [])}


def receipt_extension(filename: str) -> str:
    ext = os.path.splitext(secure_filename(filename or ""))[1].lower()
    if ext not in _allowed_extensions():
        raise ValidationError("Unsupported file type", {"allowed": sorted(_allowed_extensions())})
    return ext


def build_receipt_filename(original_name, now=None) -> str:
    """``receipt-<epoch millis><ext>``; two uploads in the same millisecond share a name."""
    now = now or utcnow()
    return f"receipt-{int(now.timestamp() * 1000)}{receipt_extension(original_name)}"


def receipt_url(filename) -> str:
    return url_for("receipt.uploaded_file", filename=filename, _external=True)


def store_receipt(order_id, file_storage):
    """Save an uploaded receipt for ``order_id``; returns ``(file_url, order)``."""
    if not file_storage or not file_storage.filename:
        raise ValidationError("receipt file is required")

    # raises NotFound before any bytes hit the disk
    order_service.get_order(order_id)

    filename = build_receipt_filename(file_storage.filename)
    abs_path = os.path.join(current_app.config["UPLOAD_FOLDER"], filename)
    try:
        file_storage.save(abs_path)
    except OSError as e:
        current_app.logger.exception("receipt: could not write %s", abs_path)
        raise PersistenceError(f"could not store receipt: {e}") from e

    file_url = receipt_url(filename)
    try:
        order = order_service.attach_receipt(order_id, file_url)
    except Exception:
        os.remove(abs_path)
        raise
    return file_url, order
