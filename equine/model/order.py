from ..extensions import db
from .types import UTCDateTime, utcnow

STATUS_AWAITING_PAYMENT = "Awaiting Payment"
STATUS_PENDING_VERIFICATION = "Pending Verification"

ORDER_STATUSES = (
    STATUS_AWAITING_PAYMENT,
    STATUS_PENDING_VERIFICATION,
    "Approved",
    "Shipped",
    "Delivered",
    "Cancelled",
    "Rejected",
)


class Order(db.Model):
    __tablename__ = "orders"

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.String(16), unique=True, nullable=False, index=True)  # e.g., "EQ-4821"
    status = db.Column(db.String(40), nullable=False, default=STATUS_AWAITING_PAYMENT, index=True)

    # {"name": "Guest", "email": None, "address": None}
    customer = db.Column(db.JSON, nullable=False, default=dict)
    items = db.Column(db.JSON, nullable=False, default=list)

    payment_method = db.Column(db.String(64))
    delivery_method = db.Column(db.String(64))

    subtotal = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    shipping_fee = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    total = db.Column(db.Numeric(12, 2), nullable=False, default=0)

    receipt_img = db.Column(db.String(512), nullable=True)
    created_at = db.Column(UTCDateTime, nullable=False, default=utcnow, index=True)

    @property
    def customer_name(self):
        return (self.customer or {}).get("name") or "Guest"

    def as_api(self):
        return {
            "orderId": self.order_id,
            "customer": {
                "name": self.customer_name,
                "email": (self.customer or {}).get("email"),
                "address": (self.customer or {}).get("address"),
            },
            "items": list(self.items or []),
            "paymentMethod": self.payment_method,
            "deliveryMethod": self.delivery_method,
            "subtotal": float(self.subtotal or 0),
            "shippingFee": float(self.shipping_fee or 0),
            "total": float(self.total or 0),
            "status": self.status,
            "receiptImg": self.receipt_img,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def as_tracking(self):
        return {
            "orderId": self.order_id,
            "status": self.status,
            "customerName": self.customer_name,
            "total": float(self.total or 0),
            "receiptImg": self.receipt_img,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
