"""Tests for the review token state machine."""

import pytest

from showroom.domain.exceptions import InvalidStateTransitionError
from showroom.domain.state_machines import (
    ReviewTokenState,
    token_state,
    validate_token_transition,
)


class TestReviewTokenState:
    """Tests for ReviewTokenState."""

    def test_issued_can_be_consumed(self) -> None:
        assert ReviewTokenState.ISSUED.can_transition_to(ReviewTokenState.CONSUMED)

    def test_consumed_is_terminal(self) -> None:
        assert ReviewTokenState.CONSUMED.is_terminal()
        assert ReviewTokenState.CONSUMED.allowed_transitions() == []

    def test_absent_cannot_be_consumed(self) -> None:
        assert not ReviewTokenState.ABSENT.can_transition_to(ReviewTokenState.CONSUMED)

    def test_only_issued_is_redeemable(self) -> None:
        assert ReviewTokenState.ISSUED.is_redeemable()
        assert not ReviewTokenState.CONSUMED.is_redeemable()
        assert not ReviewTokenState.ABSENT.is_redeemable()


class TestTokenState:
    """Tests for deriving token state from a live set."""

    def test_member_is_issued(self) -> None:
        assert token_state("abc123", {"abc123", "def456"}) == ReviewTokenState.ISSUED

    def test_non_member_is_absent(self) -> None:
        assert token_state("zzz", {"abc123"}) == ReviewTokenState.ABSENT

    def test_empty_token_is_absent(self) -> None:
        assert token_state("", {""}) == ReviewTokenState.ABSENT


class TestValidateTokenTransition:
    """Tests for validate_token_transition."""

    def test_valid_transition(self) -> None:
        validate_token_transition(
            "abc123...", ReviewTokenState.ISSUED, ReviewTokenState.CONSUMED
        )

    def test_invalid_transition_raises(self) -> None:
        with pytest.raises(InvalidStateTransitionError) as exc_info:
            validate_token_transition(
                "abc123...", ReviewTokenState.ABSENT, ReviewTokenState.CONSUMED
            )
        assert exc_info.value.details["entity_type"] == "ReviewToken"
        assert exc_info.value.details["current_state"] == "absent"
        assert exc_info.value.details["allowed_transitions"] == []
