# equine/cart/routes.py

from ..services import cart_service
from ..utils.api import ok
from ..utils.request import json_object
from . import bp


@bp.get("/<session_id>")
def get_cart(session_id):
    return ok("cart", {"cart": cart_service.get_cart(session_id)})


@bp.post("/<session_id>")
def replace_cart(session_id):
    payload = json_object()
    cart = cart_service.replace_cart(session_id, payload.get("items"))
    return ok("cart saved", {"cart": cart})


@bp.delete("/<session_id>")
def clear_cart(session_id):
    cleared = cart_service.clear_cart(session_id)
    return ok("cart cleared", {"sessionId": session_id, "cleared": cleared})
