"""Notification preference use cases."""

from .preferences import (
    GetPreferencesRequest,
    GetPreferencesUseCase,
    PreferencesResponse,
    UpdatePreferencesRequest,
    UpdatePreferencesUseCase,
)

__all__ = [
    "GetPreferencesRequest",
    "GetPreferencesUseCase",
    "PreferencesResponse",
    "UpdatePreferencesRequest",
    "UpdatePreferencesUseCase",
]
