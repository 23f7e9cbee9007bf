"""Hooks called by the content and account collaborator services.

The collaborators own posts, comments, reels, questions and answers. They
report ownership facts and comment/mention events here after their own
writes commit.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status

from devconnect.application.usecase.event import (
    RecordCommentRequest,
    RecordCommentResponse,
    RecordCommentUseCase,
    RecordMentionRequest,
    RecordMentionResponse,
    RecordMentionUseCase,
    RegisterAccountRequest,
    RegisterAccountResponse,
    RegisterAccountUseCase,
    RegisterContentRequest,
    RegisterContentResponse,
    RegisterContentUseCase,
)
from devconnect.config import AuthSettings
from devconnect.interface.api.auth import verify_service_token

router = APIRouter(prefix="/events", tags=["events"], route_class=DishkaRoute)


@router.post(
    "/accounts",
    response_model=RegisterAccountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_account(
    request: RegisterAccountRequest,
    register_account_use_case: FromDishka[RegisterAccountUseCase],
    auth_settings: FromDishka[AuthSettings],
    x_service_token: str | None = Header(default=None),
) -> RegisterAccountResponse:
    """Register a newly created account."""
    verify_service_token(auth_settings, x_service_token)
    return await register_account_use_case.execute(request)


@router.post(
    "/content",
    response_model=RegisterContentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_content(
    request: RegisterContentRequest,
    register_content_use_case: FromDishka[RegisterContentUseCase],
    auth_settings: FromDishka[AuthSettings],
    x_service_token: str | None = Header(default=None),
) -> RegisterContentResponse:
    """Record who owns a newly published content item."""
    verify_service_token(auth_settings, x_service_token)
    return await register_content_use_case.execute(request)


@router.post("/comments", response_model=RecordCommentResponse)
async def record_comment(
    request: RecordCommentRequest,
    record_comment_use_case: FromDishka[RecordCommentUseCase],
    auth_settings: FromDishka[AuthSettings],
    x_service_token: str | None = Header(default=None),
) -> RecordCommentResponse:
    """Notify the owner of a content item about a new comment."""
    verify_service_token(auth_settings, x_service_token)
    return await record_comment_use_case.execute(request)


@router.post("/mentions", response_model=RecordMentionResponse)
async def record_mentions(
    request: RecordMentionRequest,
    record_mention_use_case: FromDishka[RecordMentionUseCase],
    auth_settings: FromDishka[AuthSettings],
    x_service_token: str | None = Header(default=None),
) -> RecordMentionResponse:
    """Notify accounts mentioned in a content item."""
    verify_service_token(auth_settings, x_service_token)
    return await record_mention_use_case.execute(request)
