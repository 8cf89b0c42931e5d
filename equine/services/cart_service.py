from ..errors import ValidationError
from ..model import Cart, utcnow
from . import store

MAX_SESSION_ID = 128


def _check_session(session_id):
    session_id = (session_id or "").strip()
    if not session_id:
        raise ValidationError("sessionId is required")
    return session_id


def _storable(session_id) -> bool:
    return len(session_id) <= MAX_SESSION_ID


def get_cart(session_id) -> dict:
    """Stored cart for the session, or an empty one; a missing cart is not an error."""
    session_id = _check_session(session_id)
    cart = store.find_one(Cart, session_id) if _storable(session_id) else None
    return cart.as_api() if cart else Cart.empty_api(session_id)


def replace_cart(session_id, items) -> dict:
    """Overwrite the session's items wholesale (last writer wins)."""
    session_id = _check_session(session_id)
    if not _storable(session_id):
        raise ValidationError(f"sessionId longer than {MAX_SESSION_ID} chars")
    if not isinstance(items, list):
        raise ValidationError("items must be a list")
    cart = store.upsert(Cart, session_id, items=items, updated_at=utcnow())
    return cart.as_api()


def clear_cart(session_id) -> bool:
    session_id = _check_session(session_id)
    if not _storable(session_id):
        return False
    return store.delete_by_key(Cart, session_id)
