# equine/order/routes.py
from flask import request
from ..services import order_service
from ..utils.api import ok
from . import bp


@bp.post("/orders")
def create_order():
    payload = request.get_json(silent=True)
    order = order_service.create_order(payload)
    resp = ok("order created", {"order": order.as_api()}, status=201)
    resp.headers["X-Order-Id"] = order.order_id
    return resp


@bp.get("/track/<order_id>")
def track_order(order_id):
    order = order_service.get_order(order_id)
    return ok("order", order.as_tracking())
