from libraryapp.application.identity.protocols.user_loan_history_repository import (
    UserLoanHistoryRepositoryProtocol,
)
from libraryapp.application.identity.protocols.user_repository import UserRepositoryProtocol

__all__ = ["UserLoanHistoryRepositoryProtocol", "UserRepositoryProtocol"]
