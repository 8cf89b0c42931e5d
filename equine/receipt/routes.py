# equine/receipt/routes.py

from flask import current_app, request, send_from_directory

from ..services import receipt_service
from ..utils.api import ok
from . import bp


@bp.post("/api/upload-receipt/<order_id>")
def upload_receipt(order_id):
    file_url, order = receipt_service.store_receipt(order_id, request.files.get("receipt"))
    return ok("receipt uploaded", {"fileUrl": file_url, "order": order.as_api()})


@bp.get("/uploads/<path:filename>")
def uploaded_file(filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)
