from sqlalchemy import Boolean, Column, String

from newsroom.dependencies.mysql import Base
from newsroom.models.mixin import BaseMixin


class Article(Base, BaseMixin):
    """
    기사. 본문/SEO 등은 콘텐츠 저장소 쪽에서 관리하고, 여기서는 댓글 작성 시
    존재 여부 확인에 필요한 컬럼만 둔다.
    """

    __tablename__ = "article"

    title = Column(String(200), nullable=False, comment="기사 제목")
    slug = Column(String(200), nullable=False, index=True, comment="URL slug")
    published = Column(
        Boolean,
        nullable=False,
        default=True,
        comment="공개 여부(0/false: 비공개, 1/true: 공개)",
    )
