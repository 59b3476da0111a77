"""Poll use cases."""

from .create_poll import CreatePollRequest, CreatePollUseCase
from .get_poll import (
    GetPollRequest,
    GetPollUseCase,
    PollOptionResponse,
    PollResultsResponse,
)

__all__ = [
    "CreatePollRequest",
    "CreatePollUseCase",
    "GetPollRequest",
    "GetPollUseCase",
    "PollOptionResponse",
    "PollResultsResponse",
]
