# equine/admin/routes.py

from ..services import order_service
from ..utils.api import ok
from ..utils.request import json_object
from ..utils.decorators import admin_required
from . import bp


@bp.get("")
@admin_required
def list_orders():
    orders = order_service.list_orders()
    return ok("orders", {"total": len(orders), "orders": [o.as_api() for o in orders]})


@bp.get("/<order_id>")
@admin_required
def get_order(order_id):
    return ok("order", {"order": order_service.get_order(order_id).as_api()})


@bp.put("/<order_id>/status")
@admin_required
def update_status(order_id):
    data = json_object()
    order = order_service.update_status(order_id, data.get("status"))
    return ok("status updated", {"order": order.as_api()})
