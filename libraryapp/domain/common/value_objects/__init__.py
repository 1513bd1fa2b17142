"""Value objects shared across domain modules."""

from .ids import BookId, UserId, UserLoanHistoryId

__all__ = [
    "BookId",
    "UserId",
    "UserLoanHistoryId",
]
