"""Follow graph use cases."""

from .get_profile_stats import (
    GetProfileStatsRequest,
    GetProfileStatsResponse,
    GetProfileStatsUseCase,
)
from .list_connections import (
    ConnectionDirection,
    ConnectionItem,
    ListConnectionsRequest,
    ListConnectionsResponse,
    ListConnectionsUseCase,
)
from .toggle_follow import ToggleFollowRequest, ToggleFollowResponse, ToggleFollowUseCase

__all__ = [
    "ConnectionDirection",
    "ConnectionItem",
    "GetProfileStatsRequest",
    "GetProfileStatsResponse",
    "GetProfileStatsUseCase",
    "ListConnectionsRequest",
    "ListConnectionsResponse",
    "ListConnectionsUseCase",
    "ToggleFollowRequest",
    "ToggleFollowResponse",
    "ToggleFollowUseCase",
]
