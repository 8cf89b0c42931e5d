# ------ equine/model/__init__.py ------

from .order import Order, ORDER_STATUSES, STATUS_AWAITING_PAYMENT, STATUS_PENDING_VERIFICATION
from .cart import Cart
from .types import UTCDateTime, utcnow

__all__ = [
    "Order",
    "ORDER_STATUSES",
    "STATUS_AWAITING_PAYMENT",
    "STATUS_PENDING_VERIFICATION",
    "Cart",
    "UTCDateTime",
    "utcnow",
]
