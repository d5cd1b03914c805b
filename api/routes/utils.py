from flask import request

from api.errors import BadRequest
from api.models import MAX_INT


def parse_id(raw, entity):
    """Parse the trailing path segment as a positive integer id."""
    if not raw:
        raise BadRequest(f"Missing {entity} ID")
    if not (raw.isascii() and raw.isdigit()) or not 1 <= int(raw) <= MAX_INT:
        raise BadRequest(f"Invalid {entity} ID")
    return int(raw)


def read_json():
    data = request.get_json(silent=True)
    if data is None:
        raise BadRequest("Failed to parse request body")
    return data
