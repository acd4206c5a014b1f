"""Tagged outcome of an API call.

``capture`` runs an API coroutine and folds its outcome into exactly one of
``Ok``, ``HttpFailure`` or ``NetworkFailure``, so callers can branch on what
happened instead of on exception types.
"""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Union

import httpx

from gamehub.infrastructure.http.exceptions import HttpError


@dataclass(frozen=True)
class Ok:
    body: Any


@dataclass(frozen=True)
class HttpFailure:
    status_code: int

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500


@dataclass(frozen=True)
class NetworkFailure:
    cause: httpx.HTTPError


ApiResult = Union[Ok, HttpFailure, NetworkFailure]


async def capture(call: Awaitable[Any]) -> ApiResult:
    """Await *call* and classify its outcome. Other exceptions propagate."""
    try:
        body = await call
    except HttpError as exc:
        return HttpFailure(exc.status_code)
    except httpx.HTTPError as exc:
        return NetworkFailure(exc)
    return Ok(body)
