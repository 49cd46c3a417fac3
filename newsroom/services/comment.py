import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.exceptions import (
    CommentValidationError,
    PersistenceError,
    ReferentialError,
)
from newsroom.models.article import Article
from newsroom.models.comment import Comment
from newsroom.spam.detector import SpamAnalysis, detect

logger = logging.getLogger(__name__)

MAX_AUTHOR_LENGTH = 100
MAX_CONTENT_LENGTH = 10_000
# 최상위 댓글, 답글, 답글의 답글까지만 조회
REPLY_DEPTH = 3


class Outcome(StrEnum):
    approved = "approved"
    pending_moderation = "pending_moderation"


OUTCOME_MESSAGES = {
    Outcome.approved: "Comment submitted and approved successfully!",
    Outcome.pending_moderation: (
        "Comment submitted but flagged for moderation due to spam detection."
    ),
}


@dataclass(frozen=True)
class SubmitResult:
    outcome: Outcome
    comment_id: int
    approved: bool
    spam: bool
    analysis: SpamAnalysis

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self.outcome]


@dataclass
class CommentNode:
    id: int
    author: str
    content: str
    created_at: datetime | None
    approved: bool
    replies: list["CommentNode"] = field(default_factory=list)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _validate_submission(
    article_id: Any, parent_id: Any, author: Any, content: Any
) -> tuple[int | None, str, str]:
    """
    입력값을 검증하고 (parent_id, 공백을 제거한 author, content)를 반환합니다.
    parent_id가 0, None 등 falsy 값이면 최상위 댓글로 취급합니다.
    """
    if not article_id or not author or not content:
        raise CommentValidationError(
            "Article ID, author name, and comment content are required"
        )
    if not _is_positive_int(article_id):
        raise CommentValidationError("Valid article ID is required")
    if not isinstance(author, str) or not author.strip():
        raise CommentValidationError("Author name cannot be empty")
    if not isinstance(content, str) or not content.strip():
        raise CommentValidationError("Comment content cannot be empty")

    author = author.strip()
    content = content.strip()
    if len(author) > MAX_AUTHOR_LENGTH:
        raise CommentValidationError(
            f"Author name is too long (max {MAX_AUTHOR_LENGTH} characters)"
        )
    if len(content) > MAX_CONTENT_LENGTH:
        raise CommentValidationError(
            f"Comment is too long (max {MAX_CONTENT_LENGTH:,} characters)"
        )

    if not parent_id:
        return None, author, content
    if not _is_positive_int(parent_id):
        raise CommentValidationError("Invalid parent comment ID")

    return parent_id, author, content


async def _check_references(
    session: AsyncSession, article_id: int, parent_id: int | None
) -> None:
    article = await session.scalar(select(Article.id).where(Article.id == article_id))
    if article is None:
        raise ReferentialError("Article not found")

    if parent_id is None:
        return

    parent = await session.scalar(select(Comment).where(Comment.id == parent_id))
    if parent is None:
        raise ReferentialError("Parent comment not found")
    if parent.article_id != article_id:
        raise ReferentialError("Parent comment belongs to a different article")


async def submit_comment(
    session: AsyncSession,
    article_id: Any,
    parent_id: Any,
    author: Any,
    content: Any,
) -> SubmitResult:
    """
    댓글을 검증, 스팸 판정 후 저장합니다.

    스팸으로 판정되어도 댓글은 저장되며(approved=False, spam=True) 에러가 아닙니다.
    검증 실패 시 CommentValidationError, 기사/부모 댓글 문제는 ReferentialError,
    저장소 오류는 PersistenceError를 발생시킵니다.
    """
    parent_id, author, content = _validate_submission(
        article_id, parent_id, author, content
    )

    try:
        await _check_references(session, article_id, parent_id)
    except SQLAlchemyError as e:
        logger.exception("댓글 작성 전 기사/부모 댓글 조회 실패")
        raise PersistenceError("Failed to submit comment. Please try again.") from e

    analysis = detect(content, author)
    if analysis.is_spam:
        logger.warning(
            "스팸 댓글 감지: author=%s content=%s score=%d reasons=%s",
            author,
            content[:100],
            analysis.score,
            analysis.reasons,
        )

    comment = Comment(
        article_id=article_id,
        parent_id=parent_id,
        author=author,
        content=content,
        approved=not analysis.is_spam,
        spam=analysis.is_spam,
    )
    try:
        session.add(comment)
        await session.commit()
        await session.refresh(comment)
    except SQLAlchemyError as e:
        await session.rollback()
        logger.exception("댓글 저장 실패: article_id=%s", article_id)
        raise PersistenceError("Failed to submit comment. Please try again.") from e

    if not analysis.is_spam:
        logger.info("댓글 등록: id=%s article_id=%s", comment.id, article_id)

    return SubmitResult(
        outcome=Outcome.pending_moderation if analysis.is_spam else Outcome.approved,
        comment_id=comment.id,
        approved=comment.approved,
        spam=comment.spam,
        analysis=analysis,
    )


def _visible(stmt):
    return stmt.where(Comment.approved == True, Comment.spam == False)


def _to_node(comment: Comment) -> CommentNode:
    return CommentNode(
        id=comment.id,
        author=comment.author,
        content=comment.content,
        created_at=comment.created_at,
        approved=comment.approved,
    )


async def list_comments(session: AsyncSession, article_id: int) -> list[CommentNode]:
    """
    공개된(approved=True, spam=False) 댓글을 3단계 트리로 반환합니다.

    최상위 댓글은 최신순, 답글은 오래된 순. 3단계보다 깊은 답글은 조회하지 않습니다.
    """
    try:
        roots = await session.scalars(
            _visible(
                select(Comment).where(
                    Comment.article_id == article_id,
                    Comment.parent_id.is_(None),
                )
            ).order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        tree = [_to_node(c) for c in roots.all()]

        level = {node.id: node for node in tree}
        for _ in range(REPLY_DEPTH - 1):
            if not level:
                break
            replies = await session.scalars(
                _visible(
                    select(Comment).where(
                        Comment.article_id == article_id,
                        Comment.parent_id.in_(list(level)),
                    )
                ).order_by(Comment.created_at.asc(), Comment.id.asc())
            )
            next_level = {}
            for reply in replies.all():
                node = _to_node(reply)
                level[reply.parent_id].replies.append(node)
                next_level[node.id] = node
            level = next_level
    except SQLAlchemyError as e:
        logger.exception("댓글 조회 실패: article_id=%s", article_id)
        raise PersistenceError("Failed to fetch comments") from e

    return tree
