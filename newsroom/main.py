import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

from newsroom.config.config import settings
from newsroom.dependencies.mysql import shutdown as mysql_shutdown
from newsroom.dependencies.mysql import startup as mysql_startup
from newsroom.exception_handler import (
    comment_exception_handler,
    custom_exception_handler,
    request_validation_exception_handler,
)
from newsroom.exceptions import CommentError
from newsroom.routers import comment

# 모든 모델을 import하여 Base.metadata에 등록
import newsroom.models.article  # noqa: F401
import newsroom.models.comment  # noqa: F401

# logger 전역 설정
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    await mysql_startup()

    yield

    await mysql_shutdown()


app = FastAPI(lifespan=lifespan)
app.add_exception_handler(HTTPException, custom_exception_handler)
app.add_exception_handler(CommentError, comment_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(comment.router)


@app.get(
    "/health",
    tags=["Health Check"],
    summary="Health Check용 API",
)
async def health_check() -> str:
    return "ok"


def run() -> None:
    """`newsroom` 명령으로 서버를 실행합니다. 호스트/포트는 HOST, PORT 환경변수로 지정"""
    uvicorn.run("newsroom.main:app", host=settings.host, port=settings.port)
