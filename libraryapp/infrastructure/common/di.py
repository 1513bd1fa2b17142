"""FastAPI glue for the dependency-injector container."""

import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from libraryapp.core import container
from libraryapp.database import DatabaseSession

T = TypeVar("T")

# container.db is overridden process-wide; sync endpoints run in a threadpool
_override_lock = threading.Lock()


def inject_service(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Turn a container provider into a FastAPI dependency.

    The service and everything it is built from (repositories, unit of work)
    share the request's session.
    """

    def build(db: DatabaseSession) -> T:
        with _override_lock, container.db.override(db):
            return provider()

    return build
