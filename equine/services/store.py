"""Persistence gateway over the ``orders`` and ``carts`` tables.

Each operation commits on its own; any ``SQLAlchemyError`` is rolled back
and re-raised as ``PersistenceError`` carrying the driver message.
"""
from contextlib import contextmanager
from datetime import timedelta

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ..errors import PersistenceError
from ..extensions import db
from ..model import Cart, Order, utcnow

KEY_COLUMNS = {
    Order: "order_id",
    Cart: "session_id",
}


def _key(model):
    return getattr(model, KEY_COLUMNS[model])


def _cart_cutoff(now=None):
    ttl = current_app.config.get("CART_TTL_SECONDS", 86400)
    return (now or utcnow()) - timedelta(seconds=ttl)


def _query(model):
    q = model.query
    if model is Cart:
        q = q.filter(Cart.updated_at >= _cart_cutoff())
    return q


def _message(e: SQLAlchemyError) -> str:
    return str(getattr(e, "orig", None) or e)


@contextmanager
def _guard(action):
    try:
        yield
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception("store: %s failed", action)
        raise PersistenceError(f"{action} failed: {_message(e)}") from e


def create(model, **fields):
    with _guard(f"create {model.__tablename__}"):
        obj = model(**fields)
        db.session.add(obj)
        db.session.commit()
        return obj


def find_one(model, key):
    with _guard(f"find {model.__tablename__}"):
        return _query(model).filter(_key(model) == key).first()


def find_many_sorted(model, *order_by):
    with _guard(f"list {model.__tablename__}"):
        return _query(model).order_by(*order_by).all()


def update_by_key(model, key, **changes):
    """Apply ``changes`` to the record at ``key``; returns None when it does not exist."""
    with _guard(f"update {model.__tablename__}"):
        obj = _query(model).filter(_key(model) == key).first()
        if obj is None:
            return None
        for name, value in changes.items():
            setattr(obj, name, value)
        db.session.commit()
        return obj


def delete_by_key(model, key) -> bool:
    with _guard(f"delete {model.__tablename__}"):
        deleted = model.query.filter(_key(model) == key).delete(synchronize_session=False)
        db.session.commit()
        return deleted > 0


def upsert(model, key, **fields):
    with _guard(f"upsert {model.__tablename__}"):
        # expired rows are overwritten in place, not resurrected with stale data
        obj = model.query.filter(_key(model) == key).first()
        if obj is None:
            obj = model(**{KEY_COLUMNS[model]: key}, **fields)
            db.session.add(obj)
        else:
            for name, value in fields.items():
                setattr(obj, name, value)
        db.session.commit()
        return obj


def purge_expired_carts(now=None) -> int:
    with _guard("purge carts"):
        purged = (Cart.query
                  .filter(Cart.updated_at < _cart_cutoff(now))
                  .delete(synchronize_session=False))
        db.session.commit()
    if purged:
        current_app.logger.info("store: purged %d expired cart(s)", purged)
    return purged
