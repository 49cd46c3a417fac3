from sqlalchemy import Column, Integer, DateTime, func


class BaseMixin:
    """
    모든 모델(테이블)의 공통 컬럼을 정의
    """

    id = Column(Integer, primary_key=True, autoincrement=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), index=True)
    updated_at = Column(
        DateTime, server_default=func.now(), onupdate=func.now(), index=True
    )
