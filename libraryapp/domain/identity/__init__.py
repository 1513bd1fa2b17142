"""Identity domain layer: users and their loan histories."""

from libraryapp.domain.identity.entities.user import User
from libraryapp.domain.identity.entities.user_loan_history import UserLoanHistory, UserLoanStatus
from libraryapp.domain.identity.exceptions import (
    LoanAlreadyReturnedError,
    LoanHistoryNotFoundError,
    UserNotFoundError,
)

__all__ = [
    "LoanAlreadyReturnedError",
    "LoanHistoryNotFoundError",
    "User",
    "UserLoanHistory",
    "UserLoanStatus",
    "UserNotFoundError",
]
