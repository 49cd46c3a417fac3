"""
스팸 점수 엔진.

카탈로그 점수와 네 가지 구조 분석기 점수를 합산해 판정한다. 외부 서비스나 학습 모델 없이
규칙만으로 동작하며, 같은 입력에는 항상 같은 결과를 낸다.
"""

from dataclasses import dataclass, field
from typing import Callable

from newsroom.spam.analyzers import (
    analyze_author,
    analyze_content,
    analyze_linguistics,
    analyze_urls,
)
from newsroom.spam.indicators import score_against_catalog

SPAM_THRESHOLD = 8


@dataclass(frozen=True)
class SpamAnalysis:
    is_spam: bool
    score: int
    reasons: list[str] = field(default_factory=list)


# (사유 문구, 분석기, 분석 대상). 사유는 이 순서대로 붙는다
_ANALYZERS: tuple[tuple[str, Callable[[str], int], str], ...] = (
    ("Content structure issues", analyze_content, "content"),
    ("URL analysis issues", analyze_urls, "content"),
    ("Author name issues", analyze_author, "author"),
    ("Linguistic analysis issues", analyze_linguistics, "content"),
)


def detect(content: str, author: str) -> SpamAnalysis:
    score, reasons = score_against_catalog(content, author)

    inputs = {"content": content, "author": author}
    for label, analyzer, target in _ANALYZERS:
        sub_score = analyzer(inputs[target])
        if sub_score > 0:
            score += sub_score
            reasons.append(f"{label} (score: {sub_score})")

    return SpamAnalysis(
        is_spam=score >= SPAM_THRESHOLD, score=int(score), reasons=reasons
    )
