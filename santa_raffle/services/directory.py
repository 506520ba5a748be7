from __future__ import annotations

import json
import os
import re
import tempfile
import threading
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from santa_raffle.core.errors import DuplicateName, StorageUnavailable


@dataclass(frozen=True)
class Participant:
    id: str
    name: str

    def to_dict(self) -> dict:
        return asdict(self)


def normalize_name(name: str) -> str:
    return name.strip().upper()


LEADING_NUMBER = re.compile(r"\s*([+-]?\d+)")


def _numeric_id(participant_id: str) -> int:
    match = LEADING_NUMBER.match(participant_id)
    return int(match.group(1)) if match else 0


class ParticipantDirectory:
    """Participants kept as a JSON list of ``{"id", "name"}`` records.

    The file is re-read on every call so it can be edited by hand while the
    service runs. Writes go through a temp file and ``os.replace`` so readers
    never observe a partially written list.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self._write_lock = threading.Lock()

    def list(self) -> List[Participant]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return [Participant(id=str(item["id"]), name=str(item["name"])) for item in raw]
        except (OSError, ValueError, TypeError, KeyError) as exc:
            logger.bind(path=str(self.path)).error("Failed to read participants: {error}", error=str(exc))
            raise StorageUnavailable(f"Participants file {self.path} is unavailable.") from exc

    def find_by_id(self, participant_id: str) -> Optional[Participant]:
        participant_id = str(participant_id)
        for participant in self.list():
            if participant.id == participant_id:
                return participant
        return None

    def add(self, name: str) -> Participant:
        normalized = normalize_name(name or "")
        if not normalized:
            raise ValueError("Participant name is required.")

        with self._write_lock:
            participants = self.list()
            if any(normalize_name(p.name) == normalized for p in participants):
                raise DuplicateName(normalized)

            next_id = max((_numeric_id(p.id) for p in participants), default=0) + 1
            participant = Participant(id=str(next_id), name=normalized)
            participants.append(participant)
            self._write(participants)

        logger.bind(participant_id=participant.id).info("Participant added: {name}", name=participant.name)
        return participant

    def seed(self, participants: Sequence[Participant]) -> bool:
        with self._write_lock:
            if self.path.exists():
                return False
            self._write(participants)
        logger.bind(path=str(self.path), count=len(participants)).info("Participants file created")
        return True

    def _write(self, participants: Sequence[Participant]) -> None:
        payload = json.dumps([p.to_dict() for p in participants], indent=2, ensure_ascii=False)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as exc:
            raise StorageUnavailable(f"Could not write participants file {self.path}.") from exc
