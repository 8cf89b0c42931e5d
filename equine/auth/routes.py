from ..services import admin_gate
from ..utils.api import ok
from ..utils.request import json_object
from . import bp


@bp.post("/login")
def login():
    data = json_object()
    token, expires_in = admin_gate.login(data.get("password"))
    return ok("You've logged in successfully", {"token": token, "expiresIn": expires_in})
