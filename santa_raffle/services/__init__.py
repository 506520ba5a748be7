from santa_raffle.services.admin import AdminAggregator, AdminReport
from santa_raffle.services.directory import Participant, ParticipantDirectory
from santa_raffle.services.matching import AssignmentResult, MatchingEngine, StatusResult

__all__ = [
    "AdminAggregator",
    "AdminReport",
    "AssignmentResult",
    "MatchingEngine",
    "Participant",
    "ParticipantDirectory",
    "StatusResult",
]
