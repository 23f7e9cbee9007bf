"""Account settings use cases."""

from .manage_account import (
    DeleteAccountRequest,
    DeleteAccountUseCase,
    SetPrivacyRequest,
    SetPrivacyResponse,
    SetPrivacyUseCase,
)

__all__ = [
    "DeleteAccountRequest",
    "DeleteAccountUseCase",
    "SetPrivacyRequest",
    "SetPrivacyResponse",
    "SetPrivacyUseCase",
]
