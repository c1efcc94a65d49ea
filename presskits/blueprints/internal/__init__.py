from flask import Blueprint

bp = Blueprint("internal", __name__)

from . import routes  # noqa: E402,F401
