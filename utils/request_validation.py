"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

from typing import Iterable

from flask import Request
from werkzeug.exceptions import BadRequest


def parse_json_request(
    req: Request,
    *,
    string_keys: Iterable[str] | None = None,
) -> dict:
    """Return the parsed JSON object body or raise a 400 error.

    ``string_keys`` may be absent or null, but when given must be JSON
    strings. Presence of individual fields is checked by the caller.
    """

    if not req.is_json:
        raise BadRequest("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON.")

    if not isinstance(data, dict):
        raise BadRequest("Request JSON payload must be an object.")

    if not data:
        raise BadRequest("Request JSON body must not be empty.")

    if string_keys:
        wrong_type = [
            key for key in string_keys
            if data.get(key) is not None and not isinstance(data[key], str)
        ]
        if wrong_type:
            raise BadRequest(
                "Fields must be strings: {}.".format(", ".join(sorted(wrong_type)))
            )

    return data
