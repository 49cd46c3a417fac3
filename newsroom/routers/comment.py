import logging
import re
from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.dependencies.mysql import get_session
from newsroom.exceptions import CommentValidationError
from newsroom.services.comment import list_comments, submit_comment

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/comments", tags=["Comments"])

ARTICLE_ID_PATTERN = re.compile(r"[0-9]+")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class WriteCommentRequest(CamelModel):
    # 타입 검증은 서비스 계층에서 수행 (검증 실패 메시지를 그대로 반환하기 위함)
    article_id: Any = None
    parent_id: Any = None
    author: Any = None
    content: Any = None


class CommentStatus(CamelModel):
    id: int
    approved: bool
    spam: bool


class WriteCommentResponse(CamelModel):
    message: str
    status: str
    comment: CommentStatus


class CommentNodeResponse(CamelModel):
    id: int
    author: str
    content: str
    created_at: datetime | None
    approved: bool
    replies: list["CommentNodeResponse"] = []


@router.post("", response_model=WriteCommentResponse, status_code=201)
async def write_comment(
    body: WriteCommentRequest,
    session: AsyncSession = Depends(get_session),
) -> WriteCommentResponse:
    result = await submit_comment(
        session,
        article_id=body.article_id,
        parent_id=body.parent_id,
        author=body.author,
        content=body.content,
    )
    return WriteCommentResponse(
        message=result.message,
        status=result.outcome.value,
        comment=CommentStatus(
            id=result.comment_id, approved=result.approved, spam=result.spam
        ),
    )


@router.get("", response_model=list[CommentNodeResponse])
async def get_comments(
    article_id: str | None = Query(default=None, alias="articleId"),
    session: AsyncSession = Depends(get_session),
) -> list[CommentNodeResponse]:
    if article_id is None or not ARTICLE_ID_PATTERN.fullmatch(article_id):
        raise CommentValidationError("Valid article ID is required")
    if int(article_id) <= 0:
        raise CommentValidationError("Valid article ID is required")

    nodes = await list_comments(session, int(article_id))
    return [CommentNodeResponse.model_validate(node) for node in nodes]
