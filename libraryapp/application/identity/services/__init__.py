from libraryapp.application.identity.services.user_service import UserService

__all__ = ["UserService"]
