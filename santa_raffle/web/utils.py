from __future__ import annotations

from typing import Any, Dict, Optional

from aiohttp import web
from loguru import logger

from santa_raffle.core.errors import (
    ChainStuck,
    DuplicateName,
    ParticipantNotFound,
    RaffleError,
    StorageUnavailable,
    Unauthorized,
)
from santa_raffle.services.admin import AdminAggregator
from santa_raffle.services.matching import MatchingEngine
from santa_raffle.services.rate_limit import RateLimiter

ENGINE_KEY = web.AppKey("engine", MatchingEngine)
ADMIN_KEY = web.AppKey("admin", AdminAggregator)
RATE_LIMITER_KEY = web.AppKey("rate_limiter", RateLimiter)

ERROR_STATUSES: Dict[type, int] = {
    ChainStuck: 409,
    DuplicateName: 409,
    ParticipantNotFound: 404,
    Unauthorized: 401,
    StorageUnavailable: 503,
}


def error_response(status: int, code: str, message: str, **extra: Any) -> web.Response:
    return web.json_response({"error": code, "message": message, **extra}, status=status)


def raffle_error_response(error: RaffleError) -> web.Response:
    status = ERROR_STATUSES.get(type(error), 500)
    if isinstance(error, StorageUnavailable):
        return error_response(status, error.code, "Storage is unavailable. Please try again later.")
    return error_response(status, error.code, str(error))


async def read_json(request: web.Request) -> Optional[Dict[str, Any]]:
    if not request.can_read_body:
        return {}
    try:
        body = await request.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def check_rate_limit(request: web.Request, action: str, subject: Optional[str] = None) -> Optional[web.Response]:
    key = f"{subject if subject is not None else request.remote}:{action}"
    result = request.config_dict[RATE_LIMITER_KEY].allow(key)
    if result.allowed:
        return None
    logger.bind(remote=request.remote, action=action).warning("Rate limit hit")
    return error_response(
        429,
        "TooManyRequests",
        "You're doing that too often. Please slow down.",
        retryAfter=round(result.retry_after, 2),
    )


def log_handler_exception(action: str, remote: Optional[str], error: Exception) -> None:
    logger.bind(action=action, remote=remote).exception("Handler error: {error}", error=str(error))
