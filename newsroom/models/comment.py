from sqlalchemy import Boolean, Column, Integer, String, Text

from newsroom.dependencies.mysql import Base
from newsroom.models.mixin import BaseMixin


class Comment(Base, BaseMixin):
    __tablename__ = "comment"

    article_id = Column(Integer, nullable=False, comment="기사 article.id", index=True)
    parent_id = Column(
        Integer,
        nullable=True,
        comment="부모 댓글 comment.id. NULL이면 최상위 댓글",
        index=True,
    )
    author = Column(String(100), nullable=False, comment="작성자 표시 이름")
    content = Column(Text, nullable=False, comment="댓글 내용. 최대 10,000자")
    approved = Column(
        Boolean,
        nullable=False,
        default=False,
        comment="공개 여부(0/false: 비공개, 1/true: 공개)",
    )
    spam = Column(
        Boolean,
        nullable=False,
        default=False,
        comment="스팸 판정 여부(0/false: 정상, 1/true: 스팸)",
    )
