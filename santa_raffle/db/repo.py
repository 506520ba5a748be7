from __future__ import annotations

from typing import List, Optional, Set

from sqlalchemy import delete, select

from santa_raffle.db.models import Match, MatchHistory


def get_match_by_spinner(session, spinner_id: str) -> Optional[Match]:
    return session.scalar(select(Match).where(Match.spinner_id == spinner_id))


def list_receiver_ids(session) -> Set[str]:
    return set(session.scalars(select(Match.receiver_id)).all())


def create_match(session, spinner_id: str, receiver_id: str) -> Match:
    match = Match(spinner_id=spinner_id, receiver_id=receiver_id)
    session.add(match)
    session.flush()
    return match


def list_matches(session) -> List[Match]:
    return list(session.scalars(select(Match).order_by(Match.created_at)).all())


def archive_matches(session) -> int:
    matches = list_matches(session)
    if not matches:
        return 0
    history_rows = [
        MatchHistory(spinner_id=match.spinner_id, receiver_id=match.receiver_id)
        for match in matches
    ]
    session.add_all(history_rows)
    return len(history_rows)


def clear_matches(session) -> int:
    result = session.execute(delete(Match))
    return result.rowcount or 0


def list_match_history(session) -> List[MatchHistory]:
    return list(session.scalars(select(MatchHistory).order_by(MatchHistory.id)).all())
