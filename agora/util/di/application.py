"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.poll import CreatePollUseCase, GetPollUseCase
from agora.application.usecase.vote import (
    ToggleReactionUseCase,
    VotePollUseCase,
    VoteSideUseCase,
)
from agora.domain.service import PollService, ReactionService, SideVoteService
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> ToggleReactionUseCase:
        """Provide toggle reaction use case."""
        return ToggleReactionUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_side_use_case(
        self, side_vote_service: SideVoteService
    ) -> VoteSideUseCase:
        """Provide side vote use case."""
        return VoteSideUseCase(side_vote_service=side_vote_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_poll_use_case(self, poll_service: PollService) -> VotePollUseCase:
        """Provide poll vote use case."""
        return VotePollUseCase(poll_service=poll_service)

    # Poll use cases
    @provide(scope=Scope.REQUEST)
    def get_create_poll_use_case(self, poll_service: PollService) -> CreatePollUseCase:
        """Provide create poll use case."""
        return CreatePollUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_get_poll_use_case(self, poll_service: PollService) -> GetPollUseCase:
        """Provide get poll use case."""
        return GetPollUseCase(poll_service=poll_service)
