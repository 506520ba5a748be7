from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import List, Tuple

from loguru import logger

from santa_raffle.core.errors import Unauthorized
from santa_raffle.db.store import AssignmentStore
from santa_raffle.services.directory import Participant, ParticipantDirectory
from santa_raffle.services.matching import UNKNOWN_NAME


@dataclass(frozen=True)
class MatchView:
    spinner_id: str
    spinner_name: str
    receiver_id: str
    receiver_name: str

    def to_dict(self) -> dict:
        return {
            "spinnerId": self.spinner_id,
            "spinnerName": self.spinner_name,
            "receiverId": self.receiver_id,
            "receiverName": self.receiver_name,
        }


@dataclass(frozen=True)
class AdminReport:
    matches: List[MatchView]
    pending: List[Participant]
    total: int
    completed: int

    def to_dict(self) -> dict:
        return {
            "matches": [match.to_dict() for match in self.matches],
            "pending": [participant.to_dict() for participant in self.pending],
            "total": self.total,
            "completed": self.completed,
        }


class AdminAggregator:
    def __init__(self, directory: ParticipantDirectory, store: AssignmentStore, admin_password: str) -> None:
        self.directory = directory
        self.store = store
        self._admin_password = admin_password

    def check_secret(self, secret: str | None) -> None:
        if not secret or not secrets.compare_digest(str(secret).encode(), self._admin_password.encode()):
            logger.warning("Rejected admin request with a wrong password")
            raise Unauthorized()

    def report(self, secret: str | None) -> AdminReport:
        self.check_secret(secret)

        participants = self.directory.list()
        names = {participant.id: participant.name for participant in participants}
        matches = self.store.all_matches()

        views = [
            MatchView(
                spinner_id=match.spinner_id,
                spinner_name=names.get(match.spinner_id, UNKNOWN_NAME),
                receiver_id=match.receiver_id,
                receiver_name=names.get(match.receiver_id, UNKNOWN_NAME),
            )
            for match in matches
        ]
        spinner_ids = {match.spinner_id for match in matches}
        pending = [participant for participant in participants if participant.id not in spinner_ids]

        return AdminReport(matches=views, pending=pending, total=len(participants), completed=len(matches))

    def add_participant(self, secret: str | None, name: str) -> Tuple[Participant, int]:
        self.check_secret(secret)
        participant = self.directory.add(name)
        return participant, len(self.directory.list())
