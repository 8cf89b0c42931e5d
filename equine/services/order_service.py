import random
import re
from decimal import Decimal

from flask import current_app

from ..errors import NotFound, ValidationError
from ..model import Order, ORDER_STATUSES, STATUS_PENDING_VERIFICATION, utcnow
from . import store

ORDER_ID_PREFIX = "EQ-"
ORDER_ID_RE = re.compile(r"^EQ-\d{4}$")
CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("10000000000")  # Numeric(12, 2)

_CUSTOMER_FIELDS = ("name", "email", "address")


def generate_order_id() -> str:
    # no collision check; the unique index on orders.order_id is the backstop
    return f"{ORDER_ID_PREFIX}{random.randint(1000, 9999)}"


# ---- payload parsing -------------------------------------------------------

def _optional_str(payload, key, label=None):
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{label or key} must be a string")
    return value.strip() or None


def _amount(payload, key, default=None):
    value = payload.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{key} must be a number")
    amount = Decimal(str(value))
    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"{key} must be a non-negative number")
    if amount >= MAX_AMOUNT:
        raise ValidationError(f"{key} must be below {MAX_AMOUNT}")
    if amount != amount.quantize(CENT):
        raise ValidationError(f"{key} must have at most 2 decimal places")
    return amount


def _parse_customer(raw):
    if raw is None:
        return {"name": "Guest", "email": None, "address": None}
    if not isinstance(raw, dict):
        raise ValidationError("customer must be an object with name, email and address")
    customer = {f: _optional_str(raw, f, f"customer.{f}") for f in _CUSTOMER_FIELDS}
    customer["name"] = customer["name"] or "Guest"
    return customer


def _parse_items(raw):
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(i, dict) for i in raw):
        raise ValidationError("items must be a list of objects")
    return raw


def parse_order_payload(payload) -> dict:
    """Validate a checkout payload and map it onto Order column names."""
    if not isinstance(payload, dict):
        raise ValidationError("order body must be a JSON object")

    order_id = payload.get("orderId")
    if order_id is not None and (not isinstance(order_id, str) or not ORDER_ID_RE.match(order_id)):
        raise ValidationError("orderId must look like EQ-1234")

    subtotal = _amount(payload, "subtotal", Decimal("0"))
    shipping_fee = _amount(payload, "shippingFee", Decimal("0"))
    total = _amount(payload, "total")
    if total is None:
        total = subtotal + shipping_fee

    return {
        "order_id": order_id,
        "customer": _parse_customer(payload.get("customer")),
        "items": _parse_items(payload.get("items")),
        "payment_method": _optional_str(payload, "paymentMethod"),
        "delivery_method": _optional_str(payload, "deliveryMethod"),
        "subtotal": subtotal,
        "shipping_fee": shipping_fee,
        "total": total,
    }


# ---- lifecycle ---------------------------------------------------------------

def create_order(payload) -> Order:
    fields = parse_order_payload(payload)
    if not fields["order_id"]:
        fields["order_id"] = generate_order_id()

    order = store.create(
        Order,
        status=current_app.config.get("ORDER_DEFAULT_STATUS") or ORDER_STATUSES[0],
        created_at=utcnow(),
        **fields,
    )
    current_app.logger.info("order %s created (total=%s)", order.order_id, order.total)
    return order


def get_order(order_id) -> Order:
    order = store.find_one(Order, order_id)
    if order is None:
        raise NotFound("Order not found")
    return order


def list_orders():
    return store.find_many_sorted(Order, Order.created_at.desc(), Order.id.desc())


def update_status(order_id, new_status) -> Order:
    if not isinstance(new_status, str) or not new_status.strip():
        raise ValidationError("status is required")
    new_status = new_status.strip()
    if new_status not in ORDER_STATUSES:
        raise ValidationError(
            f"unknown status '{new_status}'", {"allowed": list(ORDER_STATUSES)}
        )

    order = store.update_by_key(Order, order_id, status=new_status)
    if order is None:
        raise NotFound("Order not found")
    current_app.logger.info("order %s status -> %s", order_id, new_status)
    return order


def attach_receipt(order_id, file_url) -> Order:
    order = store.update_by_key(
        Order, order_id, receipt_img=file_url, status=STATUS_PENDING_VERIFICATION
    )
    if order is None:
        raise NotFound("Order not found")
    current_app.logger.info("order %s receipt attached: %s", order_id, file_url)
    return order
