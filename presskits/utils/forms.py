import re

from flask import request
from werkzeug.datastructures import MultiDict

from ..services.errors import ValidationError

_CAMEL = re.compile(r'(?<!^)(?=[A-Z])')


def snake_case(key):
    return _CAMEL.sub('_', key).lower()


def json_formdata():
    """Request JSON body as form data, camelCase keys mapped to the forms' snake_case fields."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("JSON object body required")
    # null means "not provided" for every form in this service
    data = {k: v for k, v in payload.items() if v is not None}
    for key, value in data.items():
        if not isinstance(value, str):
            raise ValidationError(f"{key}: must be a string")
    return MultiDict({snake_case(k): v for k, v in data.items()})


def validated(form):
    if not form.validate():
        field, errors = next(iter(form.errors.items()))
        raise ValidationError(f"{field}: {errors[0]}")
    return form
