"""SQLAlchemy implementation of the Unit of Work port."""

import logging

from sqlalchemy.orm import Session

from libraryapp.application.common.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Unit of Work bound to a request-scoped SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        logger.debug("Rolling back unit of work")
        self.db.rollback()
