from libraryapp.domain.library.services.book_statistics_service import (
    BookStatisticsService,
    BookTypeCount,
)

__all__ = ["BookStatisticsService", "BookTypeCount"]
