from typing import Protocol

from libraryapp.domain.common.value_objects.ids import UserId
from libraryapp.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    def find_all(self) -> list[User]: ...

    def find_by_id(self, user_id: UserId) -> User | None: ...

    def find_by_name(self, name: str) -> User | None:
        """Return the user with the lowest id among those named `name`."""
        ...

    def save(self, user: User) -> User: ...

    def save_all(self, users: list[User]) -> list[User]: ...

    def delete(self, user: User) -> None: ...

    def delete_all(self) -> None: ...
