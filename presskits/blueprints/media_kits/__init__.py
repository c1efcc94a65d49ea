from flask import Blueprint

bp = Blueprint("media_kits", __name__)

from . import routes  # noqa: E402,F401
