from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.responses import JSONResponse

from newsroom.exceptions import CommentError


def custom_exception_handler(_request: Request, exc: HTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})


def comment_exception_handler(_request: Request, exc: CommentError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def request_validation_exception_handler(
    _request: Request, exc: RequestValidationError
):
    # 요청 형식 오류도 도메인 검증 오류와 같은 400 응답으로 통일
    errors = exc.errors()
    if errors:
        location = ".".join(str(loc) for loc in errors[0]["loc"] if loc != "body")
        message = f"Invalid request: {location} {errors[0]['msg']}".strip()
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"message": message})
