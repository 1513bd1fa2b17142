from libraryapp.domain.identity.services.loan_history_grouping_service import (
    LoanHistoryGroupingService,
    UserWithLoanHistories,
)

__all__ = ["LoanHistoryGroupingService", "UserWithLoanHistories"]
