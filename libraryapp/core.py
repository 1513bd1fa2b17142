from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from libraryapp.application.identity.services.user_service import UserService
from libraryapp.application.library.services.book_service import BookService
from libraryapp.domain.identity.services.loan_history_grouping_service import (
    LoanHistoryGroupingService,
)
from libraryapp.domain.library.services.book_statistics_service import BookStatisticsService
from libraryapp.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from libraryapp.infrastructure.identity.repositories import (
    UserLoanHistoryRepository,
    UserRepository,
)
from libraryapp.infrastructure.library.repositories import BookRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Provided per request
    db = providers.Dependency(instance_of=Session)

    # Repositories
    book_repository = providers.Factory(BookRepository, db=db)
    user_repository = providers.Factory(UserRepository, db=db)
    user_loan_history_repository = providers.Factory(UserLoanHistoryRepository, db=db)
    unit_of_work = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Domain services (pure domain logic, no db)
    book_statistics_service = providers.Singleton(BookStatisticsService)
    loan_history_grouping_service = providers.Singleton(LoanHistoryGroupingService)

    # Application services
    book_service = providers.Factory(
        BookService,
        book_repository=book_repository,
        user_repository=user_repository,
        user_loan_history_repository=user_loan_history_repository,
        unit_of_work=unit_of_work,
        book_statistics_service=book_statistics_service,
    )
    user_service = providers.Factory(
        UserService,
        user_repository=user_repository,
        user_loan_history_repository=user_loan_history_repository,
        unit_of_work=unit_of_work,
        loan_history_grouping_service=loan_history_grouping_service,
    )


container = Container()
