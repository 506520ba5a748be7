from __future__ import annotations

import asyncio

from aiohttp import web
from loguru import logger

from santa_raffle.core.errors import RaffleError
from santa_raffle.web.utils import (
    ADMIN_KEY,
    ENGINE_KEY,
    check_rate_limit,
    error_response,
    log_handler_exception,
    raffle_error_response,
    read_json,
)

routes = web.RouteTableDef()

INTERNAL_ERROR_MESSAGE = "Something went wrong. Please try again later."
INVALID_BODY_MESSAGE = "Request body must be a JSON object."


@routes.get("/participants")
async def participants_handler(request: web.Request) -> web.Response:
    engine = request.config_dict[ENGINE_KEY]
    try:
        participants = await asyncio.to_thread(engine.directory.list)
    except RaffleError as exc:
        return raffle_error_response(exc)
    except Exception as exc:
        log_handler_exception("participants", request.remote, exc)
        return error_response(500, "InternalError", INTERNAL_ERROR_MESSAGE)
    return web.json_response([participant.to_dict() for participant in participants])


@routes.get("/status/{spinner_id}")
async def status_handler(request: web.Request) -> web.Response:
    engine = request.config_dict[ENGINE_KEY]
    try:
        result = await asyncio.to_thread(engine.status, request.match_info["spinner_id"])
    except RaffleError as exc:
        return raffle_error_response(exc)
    except Exception as exc:
        log_handler_exception("status", request.remote, exc)
        return error_response(500, "InternalError", INTERNAL_ERROR_MESSAGE)
    return web.json_response(result.to_dict())


@routes.post("/spin")
async def spin_handler(request: web.Request) -> web.Response:
    body = await read_json(request)
    if body is None:
        return error_response(400, "BadRequest", INVALID_BODY_MESSAGE)
    spinner_id = body.get("spinnerId")
    if spinner_id is None or not str(spinner_id).strip():
        return error_response(400, "BadRequest", "Spinner ID required")
    spinner_id = str(spinner_id).strip()

    # keyed by spinner, not by address
    limited = check_rate_limit(request, "spin", subject=spinner_id)
    if limited:
        return limited

    engine = request.config_dict[ENGINE_KEY]
    try:
        result = await asyncio.to_thread(engine.assign, spinner_id)
    except RaffleError as exc:
        return raffle_error_response(exc)
    except Exception as exc:
        log_handler_exception("spin", request.remote, exc)
        return error_response(500, "InternalError", INTERNAL_ERROR_MESSAGE)
    return web.json_response(result.to_dict())


@routes.post("/reset")
async def reset_handler(request: web.Request) -> web.Response:
    engine = request.config_dict[ENGINE_KEY]
    try:
        cleared = await asyncio.to_thread(engine.reset)
    except RaffleError as exc:
        return raffle_error_response(exc)
    except Exception as exc:
        log_handler_exception("reset", request.remote, exc)
        return error_response(500, "InternalError", INTERNAL_ERROR_MESSAGE)
    logger.bind(remote=request.remote, cleared=cleared).warning("Assignments reset")
    return web.json_response({"message": "Reset successful", "cleared": cleared})


@routes.post("/admin/matches")
async def admin_matches_handler(request: web.Request) -> web.Response:
    limited = check_rate_limit(request, "admin")
    if limited:
        return limited

    body = await read_json(request)
    if body is None:
        return error_response(400, "BadRequest", INVALID_BODY_MESSAGE)

    admin = request.config_dict[ADMIN_KEY]
    try:
        report = await asyncio.to_thread(admin.report, body.get("password"))
    except RaffleError as exc:
        return raffle_error_response(exc)
    except Exception as exc:
        log_handler_exception("admin_matches", request.remote, exc)
        return error_response(500, "InternalError", INTERNAL_ERROR_MESSAGE)
    return web.json_response(report.to_dict())


@routes.post("/admin/add-participant")
async def add_participant_handler(request: web.Request) -> web.Response:
    limited = check_rate_limit(request, "admin")
    if limited:
        return limited

    body = await read_json(request)
    if body is None:
        return error_response(400, "BadRequest", INVALID_BODY_MESSAGE)

    admin = request.config_dict[ADMIN_KEY]
    name = body.get("name")
    try:
        admin.check_secret(body.get("password"))
        if not isinstance(name, str) or not name.strip():
            return error_response(400, "BadRequest", "Participant name is required")
        participant, total = await asyncio.to_thread(admin.add_participant, body.get("password"), name)
    except RaffleError as exc:
        return raffle_error_response(exc)
    except Exception as exc:
        log_handler_exception("add_participant", request.remote, exc)
        return error_response(500, "InternalError", INTERNAL_ERROR_MESSAGE)
    return web.json_response(
        {
            "message": "Participant added",
            "participant": participant.to_dict(),
            "total": total,
        }
    )
