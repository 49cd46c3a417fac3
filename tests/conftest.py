import os
import tempfile
from typing import AsyncGenerator

# newsroom 모듈을 import하기 전에 테스트용 DB를 지정해야 함
_TEST_DB_PATH = os.path.join(tempfile.gettempdir(), "newsroom-test.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_PATH}"

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402


@pytest.fixture
async def init_db():
    """
    테스트마다 테이블을 DROP + CREATE 합니다.
    종료 시 connection pool을 반환해 다음 테스트의 이벤트 루프와 섞이지 않게 합니다.
    """
    import newsroom.models.article  # noqa: F401
    import newsroom.models.comment  # noqa: F401
    from newsroom.dependencies.mysql import Base, _engine, shutdown as db_shutdown

    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    await db_shutdown()


@pytest.fixture
async def db_session(init_db) -> AsyncGenerator[AsyncSession, None]:
    from newsroom.dependencies.mysql import _async_session

    async with _async_session() as session:
        yield session


@pytest.fixture
async def api_client(init_db) -> AsyncGenerator[httpx.AsyncClient, None]:
    """DB와 연결된 테스트 클라이언트. lifespan은 init_db가 대신합니다."""
    from newsroom.main import app

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


async def _create_article(title: str, slug: str) -> int:
    from newsroom.dependencies.mysql import _async_session
    from newsroom.models.article import Article

    async with _async_session() as session:
        article = Article(title=title, slug=slug)
        session.add(article)
        await session.commit()
        await session.refresh(article)
        return article.id


@pytest.fixture
async def article_id(init_db) -> int:
    """테스트용 기사를 DB에 직접 생성합니다."""
    return await _create_article("테스트 기사", "test-article")


@pytest.fixture
async def other_article_id(init_db) -> int:
    return await _create_article("다른 기사", "other-article")
