from __future__ import annotations

from typing import Optional

from aiohttp import web

from santa_raffle.services.admin import AdminAggregator
from santa_raffle.services.matching import MatchingEngine
from santa_raffle.services.rate_limit import RateLimiter
from santa_raffle.web.handlers import routes
from santa_raffle.web.utils import ADMIN_KEY, ENGINE_KEY, RATE_LIMITER_KEY


def create_app(
    engine: MatchingEngine,
    admin: AdminAggregator,
    rate_limiter: Optional[RateLimiter] = None,
) -> web.Application:
    api = web.Application()
    api.add_routes(routes)

    app = web.Application()
    app[ENGINE_KEY] = engine
    app[ADMIN_KEY] = admin
    app[RATE_LIMITER_KEY] = rate_limiter or RateLimiter(max_calls=10, period_seconds=10)
    app.add_subapp("/api", api)
    return app


__all__ = ["create_app"]
