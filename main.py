from __future__ import annotations

import asyncio

import uvloop
from aiohttp import web
from loguru import logger

from santa_raffle.core.config import Settings, load_settings
from santa_raffle.core.logging import setup_logging
from santa_raffle.db import AssignmentStore, init_engine, make_session_factory
from santa_raffle.services import AdminAggregator, MatchingEngine, ParticipantDirectory
from santa_raffle.services.seating import build_participants, load_roster
from santa_raffle.web import create_app


def build_app(settings: Settings) -> web.Application:
    directory = ParticipantDirectory(settings.participants_file)
    roster = load_roster(settings.roster_file)
    if directory.seed(build_participants(roster, settings.shuffle_seed)):
        logger.info("Seated {count} participants with seed {seed}", count=len(roster), seed=settings.shuffle_seed)

    engine = init_engine(settings.database_url)
    store = AssignmentStore(make_session_factory(engine))

    return create_app(
        MatchingEngine(directory, store),
        AdminAggregator(directory, store, settings.admin_password),
    )


async def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_path)

    app = build_app(settings)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.host, settings.port)
    await site.start()

    logger.info("Server running on {host}:{port}", host=settings.host, port=settings.port)
    logger.info("Participants file - {path}", path=settings.participants_file)

    try:
        await asyncio.Event().wait()
    finally:
        logger.info("server stopping...")
        await runner.cleanup()
        logger.info("server stopped")


if __name__ == "__main__":
    if not getattr(asyncio, "debug", False):
        uvloop.install()

    asyncio.run(main())
