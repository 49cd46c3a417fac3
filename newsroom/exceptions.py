class CommentError(Exception):
    """댓글 처리 중 발생하는 에러의 기본 클래스. message는 그대로 사용자에게 노출된다."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CommentValidationError(CommentError):
    """필수값 누락, 형식 오류, 길이 초과"""

    status_code = 400


class ReferentialError(CommentError):
    """존재하지 않는 기사/부모 댓글, 다른 기사의 부모 댓글"""

    status_code = 404


class PersistenceError(CommentError):
    """저장소 연결 실패, 쓰기 실패"""

    status_code = 500
