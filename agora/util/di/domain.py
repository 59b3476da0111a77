"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import VotingSettings
from agora.domain.repository import UnitOfWork
from agora.domain.service import (
    ConsistencyBoundary,
    PollService,
    ReactionService,
    SideVoteService,
    TallyService,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped. They hold no session themselves:
    every operation opens its own transaction through the unit of work.
    """

    scope = Scope.REQUEST

    @provide
    def get_consistency_boundary(
        self, unit_of_work: UnitOfWork, voting_settings: VotingSettings
    ) -> ConsistencyBoundary:
        """Provide the transaction runner for vote operations."""
        return ConsistencyBoundary(
            unit_of_work=unit_of_work,
            max_attempts=voting_settings.max_conflict_retries,
        )

    @provide
    def get_tally_service(self) -> TallyService:
        """Provide counter recalculator."""
        return TallyService()

    @provide
    def get_reaction_service(
        self, boundary: ConsistencyBoundary, tally_service: TallyService
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(boundary=boundary, tally_service=tally_service)

    @provide
    def get_side_vote_service(
        self, boundary: ConsistencyBoundary, tally_service: TallyService
    ) -> SideVoteService:
        """Provide side-vote domain service."""
        return SideVoteService(boundary=boundary, tally_service=tally_service)

    @provide
    def get_poll_service(
        self,
        boundary: ConsistencyBoundary,
        tally_service: TallyService,
        voting_settings: VotingSettings,
    ) -> PollService:
        """Provide poll domain service."""
        return PollService(
            boundary=boundary,
            tally_service=tally_service,
            settings=voting_settings,
        )
