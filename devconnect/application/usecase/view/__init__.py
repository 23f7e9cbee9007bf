"""View tracking use cases."""

from .record_view import RecordViewRequest, RecordViewResponse, RecordViewUseCase

__all__ = ["RecordViewRequest", "RecordViewResponse", "RecordViewUseCase"]
