"""Vote domain service."""

import sys
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from persona.config import PaginationSettings, VotingSettings
from persona.domain.error import NotFoundError, ValidationError, VoteTallyError
from persona.domain.model import Comment, Vote, VoteUpsert
from persona.domain.repository import CommentRepository, VoteRepository
from persona.domain.value import (
    CommentId,
    Pagination,
    PersonalitySystem,
    ProfileId,
    VoteId,
    VoterKey,
    check_page_request,
    normalize_personality_value,
)

from .base import Service
from .vote_aggregator import VoteAggregator


class VoteService(Service):
    """Domain service for vote operations.

    Owns the vote records and keeps the comment tallies in step with them:
    each state-changing call writes the vote and then applies the matching
    delta through the VoteAggregator, in the caller's transaction.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
        vote_aggregator: VoteAggregator,
        voting_settings: VotingSettings,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            comment_repository: Comment repository
            vote_aggregator: Aggregator maintaining comment tallies
            voting_settings: Vote validation limits
            pagination_settings: Page size limits
        """
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository
        self.vote_aggregator = vote_aggregator
        self.voting_settings = voting_settings
        self.pagination_settings = pagination_settings

    async def submit(
        self,
        comment_id: CommentId,
        voter_key: VoterKey,
        personality_system: PersonalitySystem | str,
        personality_value: str,
        profile_id: Optional[ProfileId] = None,
    ) -> VoteUpsert:
        """Cast or change a vote.

        A voter holds one vote per (comment, system). Voting again replaces
        the value of the existing vote; voting again with the same value
        changes nothing.

        Args:
            comment_id: Comment being voted on
            voter_key: Anonymous voter identifier
            personality_system: System the vote targets
            personality_value: Value within the system (any letter case)
            profile_id: Profile the vote is attributed to (defaults to the comment's)

        Returns:
            Stored vote plus the value it replaced (None if newly cast)

        Raises:
            ValidationError: If the system, value or voter key is invalid
            NotFoundError: If the comment does not exist or is hidden
            VoteTallyError: If the vote was written but its tally could not be updated
        """
        system = PersonalitySystem.parse(personality_system)
        value = normalize_personality_value(
            system,
            personality_value,
            self.voting_settings.max_personality_value_length,
        )
        self._check_voter_key(voter_key)

        with logfire.span(
            "vote_service.submit",
            comment_id=str(comment_id),
            personality_system=system.value,
            personality_value=value,
            voter_identifier=voter_key.root,
        ):
            comment = await self._get_votable_comment(comment_id)

            now = datetime.now()
            vote = Vote(
                id=VoteId(uuid4()),
                comment_id=comment_id,
                profile_id=profile_id or comment.profile_id,
                personality_system=system,
                personality_value=value,
                voter_identifier=voter_key,
                created_at=now,
                updated_at=now,
            )
            outcome = await self.vote_repository.upsert(vote)

            try:
                if outcome.is_new_vote:
                    await self.vote_aggregator.apply_new_vote(comment_id, system, value)
                elif not outcome.is_unchanged:
                    await self.vote_aggregator.apply_vote_change(
                        comment_id, system, outcome.previous_value, value
                    )
            except Exception as e:
                logfire.error(
                    "Vote tally update failed after vote write",
                    comment_id=str(comment_id),
                    voter_identifier=voter_key.root,
                    personality_system=system.value,
                    personality_value=value,
                    previous_value=outcome.previous_value,
                    error=str(e),
                    _exc_info=sys.exc_info(),
                )
                raise VoteTallyError(str(comment_id), system.value) from e

            logfire.info(
                "Vote recorded",
                comment_id=str(comment_id),
                personality_system=system.value,
                is_new_vote=outcome.is_new_vote,
                is_unchanged=outcome.is_unchanged,
            )
            return outcome

    async def remove(
        self,
        comment_id: CommentId,
        voter_key: VoterKey,
        personality_system: PersonalitySystem | str,
    ) -> Optional[Vote]:
        """Remove a voter's vote under one system.

        Returns:
            The removed vote, or None if the voter had no such vote

        Raises:
            ValidationError: If the system is invalid
            VoteTallyError: If the vote was deleted but its tally could not be updated
        """
        system = PersonalitySystem.parse(personality_system)

        with logfire.span(
            "vote_service.remove",
            comment_id=str(comment_id),
            personality_system=system.value,
            voter_identifier=voter_key.root,
        ):
            removed = await self.vote_repository.delete_by_key(
                comment_id, voter_key, system
            )
            if removed is None:
                logfire.info(
                    "No vote to remove",
                    comment_id=str(comment_id),
                    personality_system=system.value,
                )
                return None

            try:
                await self.vote_aggregator.apply_vote_removal(
                    comment_id, system, removed.personality_value
                )
            except Exception as e:
                logfire.error(
                    "Vote tally update failed after vote removal",
                    comment_id=str(comment_id),
                    voter_identifier=voter_key.root,
                    personality_system=system.value,
                    personality_value=removed.personality_value,
                    error=str(e),
                    _exc_info=sys.exc_info(),
                )
                raise VoteTallyError(str(comment_id), system.value) from e

            logfire.info(
                "Vote removed",
                comment_id=str(comment_id),
                personality_system=system.value,
            )
            return removed

    async def find_one(
        self,
        comment_id: CommentId,
        voter_key: VoterKey,
        personality_system: PersonalitySystem | str,
    ) -> Optional[Vote]:
        """Find a voter's vote under one system."""
        system = PersonalitySystem.parse(personality_system)
        return await self.vote_repository.find_by_key(comment_id, voter_key, system)

    async def list_for_comment(
        self,
        comment_id: CommentId,
        personality_system: PersonalitySystem | str | None = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> tuple[list[Vote], Pagination]:
        """List votes on a visible comment, newest first.

        Raises:
            NotFoundError: If the comment does not exist or is hidden
            ValidationError: If the system or page request is invalid
        """
        system = (
            PersonalitySystem.parse(personality_system) if personality_system else None
        )
        if page is None:
            page = 1
        if limit is None:
            limit = self.pagination_settings.vote_default_limit
        check_page_request(page, limit, self.pagination_settings.vote_max_limit)

        await self._get_votable_comment(comment_id)

        pagination = Pagination.from_totals(
            page, limit, await self.vote_repository.count_by_comment(comment_id, system)
        )
        votes = await self.vote_repository.find_by_comment(
            comment_id, system, limit=limit, offset=pagination.offset
        )
        return votes, pagination

    async def history(
        self,
        voter_key: VoterKey,
        personality_system: PersonalitySystem | str | None = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> tuple[list[Vote], Pagination]:
        """List a voter's votes across all comments, newest first."""
        system = (
            PersonalitySystem.parse(personality_system) if personality_system else None
        )
        if page is None:
            page = 1
        if limit is None:
            limit = self.pagination_settings.vote_default_limit
        check_page_request(page, limit, self.pagination_settings.vote_max_limit)

        pagination = Pagination.from_totals(
            page, limit, await self.vote_repository.count_by_voter(voter_key, system)
        )
        votes = await self.vote_repository.find_by_voter(
            voter_key, system, limit=limit, offset=pagination.offset
        )
        return votes, pagination

    async def _get_votable_comment(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or not comment.is_visible:
            logfire.warn("Vote on missing comment", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    def _check_voter_key(self, voter_key: VoterKey) -> None:
        max_length = self.voting_settings.max_voter_identifier_length
        if len(voter_key.root) > max_length:
            raise ValidationError(
                "voter_identifier",
                f"Voter identifier must not exceed {max_length} characters",
            )
