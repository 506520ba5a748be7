from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from loguru import logger

from santa_raffle.core.errors import ChainStuck, Conflict, ParticipantNotFound
from santa_raffle.db.store import AssignmentStore
from santa_raffle.services.directory import Participant, ParticipantDirectory

UNKNOWN_NAME = "Unknown"


@dataclass(frozen=True)
class AssignmentResult:
    receiver_id: str
    receiver_name: str
    already_assigned: bool

    def to_dict(self) -> dict:
        return {
            "receiverId": self.receiver_id,
            "receiverName": self.receiver_name,
            "alreadyAssigned": self.already_assigned,
        }


@dataclass(frozen=True)
class StatusResult:
    has_played: bool
    receiver_id: Optional[str] = None
    receiver_name: Optional[str] = None

    def to_dict(self) -> dict:
        if not self.has_played:
            return {"hasPlayed": False}
        return {
            "hasPlayed": True,
            "receiverName": self.receiver_name,
            "receiverId": self.receiver_id,
        }


class MatchingEngine:
    """Greedy draw: each spinner picks uniformly among the receivers still free.

    The engine never backtracks. A late spinner whose only free receiver is
    themselves gets ``ChainStuck`` and needs a reset.
    """

    def __init__(
        self,
        directory: ParticipantDirectory,
        store: AssignmentStore,
        rng: Optional[random.Random] = None,
        max_attempts: Optional[int] = None,
    ) -> None:
        self.directory = directory
        self.store = store
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts

    def _receiver_name(self, receiver_id: str) -> str:
        receiver = self.directory.find_by_id(receiver_id)
        return receiver.name if receiver else UNKNOWN_NAME

    def _existing(self, spinner_id: str) -> Optional[AssignmentResult]:
        receiver_id = self.store.get_by_spinner(spinner_id)
        if receiver_id is None:
            return None
        return AssignmentResult(receiver_id, self._receiver_name(receiver_id), already_assigned=True)

    def eligible_receivers(self, spinner_id: str) -> List[Participant]:
        taken = self.store.all_receivers()
        return [p for p in self.directory.list() if p.id != spinner_id and p.id not in taken]

    def assign(self, spinner_id: str) -> AssignmentResult:
        spinner_id = str(spinner_id)
        existing = self._existing(spinner_id)
        if existing:
            return existing

        if self.directory.find_by_id(spinner_id) is None:
            raise ParticipantNotFound(spinner_id)

        # each lost receiver race removes at least one candidate
        attempts = self.max_attempts or len(self.directory.list())
        for _ in range(max(attempts, 1)):
            eligible = self.eligible_receivers(spinner_id)
            if not eligible:
                logger.bind(spinner_id=spinner_id).warning("No eligible receivers left")
                raise ChainStuck(spinner_id)

            winner = self.rng.choice(eligible)
            try:
                self.store.insert(spinner_id, winner.id)
            except Conflict:
                existing = self._existing(spinner_id)
                if existing:
                    logger.bind(spinner_id=spinner_id).info("Concurrent draw already stored")
                    return existing
                logger.bind(spinner_id=spinner_id, receiver_id=winner.id).info(
                    "Receiver taken by a concurrent draw, drawing again"
                )
                continue

            logger.bind(spinner_id=spinner_id, receiver_id=winner.id).info("Match stored")
            return AssignmentResult(winner.id, winner.name, already_assigned=False)

        raise ChainStuck(spinner_id)

    def status(self, spinner_id: str) -> StatusResult:
        existing = self._existing(str(spinner_id))
        if not existing:
            return StatusResult(has_played=False)
        return StatusResult(True, existing.receiver_id, existing.receiver_name)

    def reset(self) -> int:
        return self.store.clear()
