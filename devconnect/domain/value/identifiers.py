"""Strongly typed identifiers for DevConnect domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
AccountId = NewType("AccountId", UUID)
FollowEdgeId = NewType("FollowEdgeId", UUID)
MarkId = NewType("MarkId", UUID)
VoteId = NewType("VoteId", UUID)
NotificationId = NewType("NotificationId", UUID)

# Content lives in external services (posts, reels, questions, answers, comments)
ContentId = NewType("ContentId", UUID)

# One playback sitting of a viewer on a content item
ViewSessionId = NewType("ViewSessionId", UUID)
