"""
스팸 지표 카탈로그.

심각도별(critical/high/medium/low) 키워드와 정규식 패턴 테이블. 모듈 import 시
한 번 만들어지고 이후 변경되지 않는다.
"""

import re
from dataclasses import dataclass
from enum import IntEnum


class Weight(IntEnum):
    CRITICAL = 10
    HIGH = 5
    MEDIUM = 3
    LOW = 1


@dataclass(frozen=True)
class OrderedPattern:
    """
    한 줄 안에서 steps가 순서대로 나타나는지 검사합니다.

    `A.*B.*C` 정규식과 같은 의미지만 줄마다 A의 첫 매치, 그 뒤 B의 첫 매치, 그 뒤 C의
    첫 매치만 찾으므로 입력 길이에 선형입니다.
    """

    steps: tuple[re.Pattern, ...]

    def search(self, text: str) -> bool:
        for line in text.split("\n"):
            pos = 0
            for step in self.steps:
                match = step.search(line, pos)
                if match is None:
                    break
                pos = match.end()
            else:
                return True
        return False


@dataclass(frozen=True)
class Tier:
    weight: Weight
    keyword_label: str
    pattern_label: str
    keywords: tuple[str, ...]
    patterns: tuple[OrderedPattern, ...] = ()
    # 키워드/패턴을 작성자 이름에도 적용할지 여부
    keywords_in_author: bool = False
    patterns_in_author: bool = False


def _ordered(*steps: str) -> OrderedPattern:
    return OrderedPattern(tuple(re.compile(s, re.IGNORECASE) for s in steps))


CRITICAL = Tier(
    weight=Weight.CRITICAL,
    keyword_label="Critical spam keyword",
    pattern_label="Critical spam pattern detected",
    keywords=(
        # 의약품
        "viagra", "cialis", "levitra", "buy pills", "prescription drugs",
        "no prescription", "pharmacy online", "cheap meds", "discount pharmacy",
        "rx online",
        # 금융 사기
        "get rich quick", "make money fast", "earn $", "guaranteed income",
        "financial freedom", "work from home", "passive income",
        "investment opportunity", "double your money", "no risk investment",
        "guaranteed profit", "bitcoin investment", "crypto mining",
        # 불법 거래
        "buy drugs", "sell drugs", "drug dealer", "weed dealer", "cocaine",
        "heroin", "fake id", "fake passport", "stolen credit", "hacked account",
        "counterfeit",
        # 성인
        "escort service", "adult dating", "cam girls", "xxx videos", "porn site",
        # 전형적인 사기 문구
        "nigerian prince", "inheritance money", "lottery winner", "claim prize",
        "congratulations winner", "selected recipient", "tax refund",
    ),
    patterns=(
        _ordered(r"\b(?:viagra|cialis)\b", r"(?:cheap|buy|order)"),
        _ordered(r"(?:make|earn)", r"\$\d+", r"(?:fast|quick|easy|guaranteed)"),
        _ordered(
            r"(?:buy|sell)", r"(?:drugs|weed|cocaine|pills)", r"(?:online|cheap|quality)"
        ),
        _ordered(r"(?:click|visit)", r"(?:link|website)", r"(?:now|today|immediately)"),
        _ordered(r"\b(?:guaranteed|100%)", r"(?:profit|income|return)"),
    ),
    keywords_in_author=True,
    patterns_in_author=True,
)

HIGH = Tier(
    weight=Weight.HIGH,
    keyword_label="High-risk keyword",
    pattern_label="High-risk pattern detected",
    keywords=(
        "casino", "gambling", "poker online", "slots", "jackpot", "lottery ticket",
        "weight loss", "lose weight", "diet pills", "miracle cure", "anti aging",
        "credit repair", "debt relief", "loan approval", "bad credit ok",
        "insurance claim", "accident lawyer", "compensation claim",
        "mlm", "pyramid scheme", "network marketing", "be your own boss",
        "unlimited earning", "residual income", "join our team",
        "replica watches", "designer replica", "knockoff", "bootleg",
    ),
    patterns=(
        _ordered(r"(?:win|won)", r"(?:\$|money|prize|cash)"),
        _ordered(r"(?:limited|special)", r"(?:offer|deal|price)", r"(?:today|now)"),
        _ordered(r"(?:call|text)", r"(?:now|today)", r"\d{3}[-.]?\d{3}[-.]?\d{4}"),
        _ordered(r"(?:visit|check)", r"(?:website|link|site)"),
    ),
    keywords_in_author=True,
    patterns_in_author=True,
)

MEDIUM = Tier(
    weight=Weight.MEDIUM,
    keyword_label="Medium-risk keyword",
    pattern_label="Medium-risk pattern detected",
    keywords=(
        "free trial", "no cost", "risk free", "money back", "satisfaction guaranteed",
        "as seen on tv", "celebrity endorsed", "doctor recommended", "clinically proven",
        "secret formula", "breakthrough", "revolutionary", "amazing results",
        "limited time", "act now", "dont wait", "hurry up", "expires soon",
        "check this out", "you wont believe", "shocking truth", "they dont want you",
    ),
    patterns=(
        _ordered(r"\b(?:free|no cost)", r"(?:shipping|trial|consultation)"),
        _ordered(r"(?:order|buy|purchase)", r"(?:now|today)"),
        _ordered(r"(?:lowest|best|cheapest)", r"price"),
    ),
    keywords_in_author=True,
)

LOW = Tier(
    weight=Weight.LOW,
    keyword_label="Low-risk keyword",
    pattern_label="Low-risk pattern detected",
    keywords=(
        "special offer", "discount", "sale", "promotion", "deal",
        "website", "link", "visit", "check out", "learn more",
    ),
)

TIERS: tuple[Tier, ...] = (CRITICAL, HIGH, MEDIUM, LOW)

AUTHOR_SUFFIX = " in author name"


def score_against_catalog(body: str, author: str) -> tuple[int, list[str]]:
    """
    본문과 작성자 이름을 카탈로그와 대조해 (점수, 사유 목록)을 반환합니다.

    키워드는 소문자 부분 문자열 포함 여부로, 패턴은 원문 그대로 검사합니다.
    키워드/패턴 하나는 본문에서 최대 한 번, 작성자 이름에서 최대 한 번 점수를 더합니다.
    """
    score = 0
    reasons: list[str] = []
    lower_body = body.lower()
    lower_author = author.lower()

    for tier in TIERS:
        for keyword in tier.keywords:
            if keyword in lower_body:
                score += tier.weight
                reasons.append(f'{tier.keyword_label}: "{keyword}"')
            if tier.keywords_in_author and keyword in lower_author:
                score += tier.weight
                reasons.append(f'{tier.keyword_label}: "{keyword}"{AUTHOR_SUFFIX}')

        for pattern in tier.patterns:
            if pattern.search(body):
                score += tier.weight
                reasons.append(tier.pattern_label)
            if tier.patterns_in_author and pattern.search(author):
                score += tier.weight
                reasons.append(f"{tier.pattern_label}{AUTHOR_SUFFIX}")

    return score, reasons
