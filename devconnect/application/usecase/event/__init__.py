"""Collaborator hook use cases."""

from .record_comment import (
    RecordCommentRequest,
    RecordCommentResponse,
    RecordCommentUseCase,
)
from .record_mention import (
    RecordMentionRequest,
    RecordMentionResponse,
    RecordMentionUseCase,
    extract_handles,
)
from .register import (
    RegisterAccountRequest,
    RegisterAccountResponse,
    RegisterAccountUseCase,
    RegisterContentRequest,
    RegisterContentResponse,
    RegisterContentUseCase,
)

__all__ = [
    "RecordCommentRequest",
    "RecordCommentResponse",
    "RecordCommentUseCase",
    "RecordMentionRequest",
    "RecordMentionResponse",
    "RecordMentionUseCase",
    "RegisterAccountRequest",
    "RegisterAccountResponse",
    "RegisterAccountUseCase",
    "RegisterContentRequest",
    "RegisterContentResponse",
    "RegisterContentUseCase",
    "extract_handles",
]
