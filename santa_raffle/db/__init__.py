from santa_raffle.db.models import Base, Match, MatchHistory
from santa_raffle.db.session import get_session, init_engine, make_session_factory
from santa_raffle.db.store import AssignmentStore, MatchRecord

__all__ = [
    "AssignmentStore",
    "Base",
    "Match",
    "MatchHistory",
    "MatchRecord",
    "get_session",
    "init_engine",
    "make_session_factory",
]
