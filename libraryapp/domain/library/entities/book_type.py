"""Closed set of book categories."""

from enum import StrEnum


class BookType(StrEnum):
    """Category a book is shelved under."""

    COMPUTER = "COMPUTER"
    SCIENCE = "SCIENCE"
    SOCIETY = "SOCIETY"
    LANGUAGE = "LANGUAGE"
    ART = "ART"
    ETC = "ETC"
