"""HTTP handlers for reviews."""

from __future__ import annotations

import json
from typing import Any

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import Response

from hamburguer.dto import AlexaResponse, ReviewInput
from hamburguer.usecases import ReviewUseCase

_JSON_ESCAPES = (
    ("&", "\\u0026"),
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def _encode_json(data: Any) -> bytes:
    encoded = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    for char, escape in _JSON_ESCAPES:
        encoded = encoded.replace(char, escape)
    return (encoded + "\n").encode("utf-8")


def _error(exc: Exception, status_code: int) -> Response:
    return Response(
        f"{exc}\n",
        status_code=status_code,
        media_type="text/plain",
        headers={"X-Content-Type-Options": "nosniff"},
    )


class ReviewController:
    """Serves the review endpoints on top of a review use case."""

    def __init__(self, use_case: ReviewUseCase) -> None:
        self.use_case = use_case

    async def count(self, request: Request) -> Response:
        try:
            total = await run_in_threadpool(self.use_case.count)
        except Exception as exc:
            return _error(exc, 500)
        return Response(str(total), status_code=200, media_type="text/plain")

    async def get_top3_reviews(self, request: Request) -> Response:
        try:
            message = await run_in_threadpool(self.use_case.get_top3_reviews)
        except Exception as exc:
            return _error(exc, 500)
        body = _encode_json(AlexaResponse.plain_text(message).to_dict())
        return Response(body, status_code=200, media_type="application/json")

    async def save(self, request: Request) -> Response:
        raw = await request.body()
        try:
            review = ReviewInput.from_dict(json.loads(raw))
        except ValueError as exc:
            return _error(exc, 400)
        try:
            await run_in_threadpool(self.use_case.save, review)
        except Exception as exc:
            return _error(exc, 500)
        return Response(status_code=201)