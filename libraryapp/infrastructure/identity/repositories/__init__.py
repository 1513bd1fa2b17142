from libraryapp.infrastructure.identity.repositories.user_loan_history_repository import (
    UserLoanHistoryRepository,
)
from libraryapp.infrastructure.identity.repositories.user_repository import UserRepository

__all__ = ["UserLoanHistoryRepository", "UserRepository"]
