"""CORS with JSON error bodies.

Starlette answers a rejected preflight with plain text. This variant keeps its
checks and reshapes the rejection as ``{"error": message}``; a disallowed
origin gets the same 403 as a classification request would.
"""

from __future__ import annotations

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse, Response

from ecosort.application.common.exceptions import OriginRejectedError

DISALLOWED_ORIGIN_TEXT = b"origin"
DROPPED_HEADERS = frozenset({"content-length", "content-type"})


class JSONErrorCORSMiddleware(CORSMiddleware):
    """CORSMiddleware whose preflight failures are JSON."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code < 400:
            return response

        headers = {
            name: value
            for name, value in response.headers.items()
            if name.lower() not in DROPPED_HEADERS
        }
        if DISALLOWED_ORIGIN_TEXT in response.body:
            message = OriginRejectedError(request_headers.get("origin", "")).message
            return JSONResponse({"error": message}, status_code=403, headers=headers)
        return JSONResponse(
            {"error": response.body.decode("utf-8", errors="replace")},
            status_code=response.status_code,
            headers=headers,
        )
