# equine/model/cart.py
from ..extensions import db
from .types import UTCDateTime, utcnow


class Cart(db.Model):
    __tablename__ = "carts"

    id = db.Column(db.Integer, primary_key=True)
    session_id = db.Column(db.String(128), unique=True, nullable=False, index=True)
    items = db.Column(db.JSON, nullable=False, default=list)
    # the row expires CART_TTL_SECONDS after this
    updated_at = db.Column(UTCDateTime, nullable=False, default=utcnow, onupdate=utcnow, index=True)

    @staticmethod
    def empty_api(session_id):
        return {"sessionId": session_id, "items": [], "updatedAt": None}

    def as_api(self):
        return {
            "sessionId": self.session_id,
            "items": list(self.items or []),
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
