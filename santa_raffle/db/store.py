from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from santa_raffle.core.errors import Conflict, StorageUnavailable
from santa_raffle.db import repo
from santa_raffle.db.session import get_session


@dataclass(frozen=True)
class MatchRecord:
    spinner_id: str
    receiver_id: str


class AssignmentStore:
    """Durable spinner -> receiver relation.

    Each method runs in its own transaction. ``insert`` is the only write that
    can lose a race: the primary key on ``spinner_id`` and the unique
    constraint on ``receiver_id`` make it an atomic insert-if-absent for both.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def get_by_spinner(self, spinner_id: str) -> Optional[str]:
        try:
            with get_session(self._session_factory) as session:
                match = repo.get_match_by_spinner(session, spinner_id)
                return match.receiver_id if match else None
        except SQLAlchemyError as exc:
            raise StorageUnavailable(str(exc)) from exc

    def all_receivers(self) -> Set[str]:
        try:
            with get_session(self._session_factory) as session:
                return repo.list_receiver_ids(session)
        except SQLAlchemyError as exc:
            raise StorageUnavailable(str(exc)) from exc

    def insert(self, spinner_id: str, receiver_id: str) -> None:
        try:
            with get_session(self._session_factory) as session:
                repo.create_match(session, spinner_id, receiver_id)
        except IntegrityError as exc:
            logger.bind(spinner_id=spinner_id, receiver_id=receiver_id).debug("Match insert conflict")
            raise Conflict(f"Spinner {spinner_id} or receiver {receiver_id} is already matched.") from exc
        except SQLAlchemyError as exc:
            raise StorageUnavailable(str(exc)) from exc

    def all_matches(self) -> List[MatchRecord]:
        try:
            with get_session(self._session_factory) as session:
                return [
                    MatchRecord(spinner_id=match.spinner_id, receiver_id=match.receiver_id)
                    for match in repo.list_matches(session)
                ]
        except SQLAlchemyError as exc:
            raise StorageUnavailable(str(exc)) from exc

    def clear(self) -> int:
        try:
            with get_session(self._session_factory) as session:
                repo.archive_matches(session)
                cleared = repo.clear_matches(session)
        except SQLAlchemyError as exc:
            raise StorageUnavailable(str(exc)) from exc
        logger.bind(cleared=cleared).info("Matches cleared")
        return cleared
