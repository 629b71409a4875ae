"""State machine for review tokens.

A review token lives in one product's token set until it is redeemed.
Callers cannot tell a consumed token from one that was never issued, so
both are rejected the same way.
"""

from enum import Enum

from showroom.domain.exceptions import InvalidStateTransitionError


class ReviewTokenState(str, Enum):
    """Review token lifecycle states.

    State diagram:
        (generate)
            │
            ▼
        ISSUED ──── redeem ────► CONSUMED

        ABSENT  (never issued, or already consumed)
    """

    ISSUED = "issued"
    CONSUMED = "consumed"
    ABSENT = "absent"

    def can_transition_to(self, target: "ReviewTokenState") -> bool:
        """Check if transition to target state is valid.

        Args:
            target: Target state to transition to.

        Returns:
            True if transition is valid.
        """
        return target in _TOKEN_TRANSITIONS.get(self, set())

    def allowed_transitions(self) -> list["ReviewTokenState"]:
        """Get list of valid target states."""
        return list(_TOKEN_TRANSITIONS.get(self, set()))

    def is_redeemable(self) -> bool:
        """Check if a review may be recorded against this token."""
        return self == ReviewTokenState.ISSUED

    def is_terminal(self) -> bool:
        """Check if this is a terminal (final) state."""
        return len(_TOKEN_TRANSITIONS.get(self, set())) == 0


_TOKEN_TRANSITIONS: dict[ReviewTokenState, set[ReviewTokenState]] = {
    ReviewTokenState.ISSUED: {ReviewTokenState.CONSUMED},
    ReviewTokenState.CONSUMED: set(),  # Terminal state
    ReviewTokenState.ABSENT: set(),
}


def token_state(token: str, live_tokens: set[str] | frozenset[str]) -> ReviewTokenState:
    """Derive a token's state from a product's live token set."""
    if token and token in live_tokens:
        return ReviewTokenState.ISSUED
    return ReviewTokenState.ABSENT


def validate_token_transition(
    token_ref: str,
    current: ReviewTokenState,
    target: ReviewTokenState,
) -> None:
    """Validate a review token state transition.

    Args:
        token_ref: Short token reference for error context.
        current: Current token state.
        target: Target token state.

    Raises:
        InvalidStateTransitionError: If transition is not allowed.
    """
    if not current.can_transition_to(target):
        raise InvalidStateTransitionError(
            entity_type="ReviewToken",
            entity_id=token_ref,
            current_state=current.value,
            target_state=target.value,
            allowed_transitions=[s.value for s in current.allowed_transitions()],
        )
