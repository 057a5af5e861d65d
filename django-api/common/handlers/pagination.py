"""Page/limit parsing and the list response envelope."""

import math
from typing import Any

from django.conf import settings
from rest_framework.request import Request
from rest_framework.response import Response

from common.domain.errors import InvalidInputError
from common.domain.models import PageRequest


def _positive_int(raw: str | None, default: int, name: str) -> int:
    if raw in (None, ""):
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a positive integer") from None
    if value < 1:
        raise InvalidInputError(f"{name} must be a positive integer")
    return value


def page_request(request: Request, default_limit: int | None = None) -> PageRequest:
    """Parse 1-indexed ``page`` and ``limit`` query parameters."""
    if default_limit is None:
        default_limit = settings.EVENTHUB["DEFAULT_PAGE_SIZE"]
    return PageRequest(
        page=_positive_int(request.query_params.get("page"), 1, "page"),
        limit=_positive_int(request.query_params.get("limit"), default_limit, "limit"),
    )


def paginated_response(
    items: list[Any], total: int, page: PageRequest, key: str, **extra: Any
) -> Response:
    body = {
        "success": True,
        "count": len(items),
        "total": total,
        "pagination": {
            "page": page.page,
            "limit": page.limit,
            "pages": math.ceil(total / page.limit),
        },
        key: items,
    }
    body.update(extra)
    return Response(body)
