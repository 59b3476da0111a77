"""Vote use cases."""

from .toggle_reaction import (
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
)
from .vote_poll import VotePollRequest, VotePollUseCase
from .vote_side import VoteSideRequest, VoteSideResponse, VoteSideUseCase

__all__ = [
    "ToggleReactionRequest",
    "ToggleReactionResponse",
    "ToggleReactionUseCase",
    "VoteSideRequest",
    "VoteSideResponse",
    "VoteSideUseCase",
    "VotePollRequest",
    "VotePollUseCase",
]
