"""Domain services."""

from .base import Service
from .boundary import ConsistencyBoundary
from .poll_service import PollService
from .reaction_service import ReactionService
from .side_vote_service import SideVoteService
from .tally_service import TallyService, build_poll_results

__all__ = [
    "ConsistencyBoundary",
    "PollService",
    "ReactionService",
    "Service",
    "SideVoteService",
    "TallyService",
    "build_poll_results",
]
