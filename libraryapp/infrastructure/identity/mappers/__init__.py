from libraryapp.infrastructure.identity.mappers.user_loan_history_mapper import (
    UserLoanHistoryMapper,
)
from libraryapp.infrastructure.identity.mappers.user_mapper import UserMapper

__all__ = ["UserLoanHistoryMapper", "UserMapper"]
