from libraryapp.domain.identity.entities.user import User
from libraryapp.domain.identity.entities.user_loan_history import UserLoanHistory, UserLoanStatus

__all__ = ["User", "UserLoanHistory", "UserLoanStatus"]
