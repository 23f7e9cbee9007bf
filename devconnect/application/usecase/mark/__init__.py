"""Engagement mark use cases."""

from .toggle_mark import ToggleMarkRequest, ToggleMarkResponse, ToggleMarkUseCase

__all__ = ["ToggleMarkRequest", "ToggleMarkResponse", "ToggleMarkUseCase"]
