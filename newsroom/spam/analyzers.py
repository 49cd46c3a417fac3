"""
구조 분석기.

어휘가 아니라 문자열의 "모양"을 본다. 각 함수는 입력 하나를 받아 0 이상의 정수 점수를
반환하며, 빈 문자열을 포함한 어떤 입력에도 예외를 내지 않는다.
"""

import re

from newsroom.spam.indicators import Weight

SHORT_CONTENT_LENGTH = 5
LONG_CONTENT_LENGTH = 10_000
SHORT_AUTHOR_LENGTH = 2
LONG_AUTHOR_LENGTH = 50

_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL_CHAR = re.compile(r"""[!@#$%^&*()_+=\[\]{};':"\\|,.<>/?]""")
_REPEATED_CHAR = re.compile(r"(.)\1{5,}")
_REPEATED_PUNCTUATION = re.compile(r"!{3,}|\?{3,}|\.{4,}")

_URL = re.compile(r"https?://[^\s]+", re.IGNORECASE)
SUSPICIOUS_DOMAINS = (
    # 단축 URL
    "bit.ly", "tinyurl", "t.co", "goo.gl", "ow.ly", "short.link", "tiny.cc",
    # 무료 TLD
    ".tk", ".ml", ".ga", ".cf",
    # 무료 호스팅
    "blogspot", "wordpress.com", "wix.com",
)

_HANDLE_WITH_NUMBER = re.compile(r"[a-z]+[0-9]+", re.IGNORECASE)
_DIGITS_ONLY = re.compile(r"[0-9]+")
_LETTER = re.compile(r"[a-zA-Z]")
_SUSPICIOUS_NAMES = (
    re.compile(r"admin|administrator|moderator|webmaster|root|test|guest", re.IGNORECASE),
    re.compile(r"bot|spam|fake|temp|anonymous", re.IGNORECASE),
)
_SUSPICIOUS_NAME_TERMS = re.compile(
    r"dealer|seller|buyer|casino|porn|xxx|sex", re.IGNORECASE
)


def _ratio(count: int, total: int) -> float:
    return count / total if total else 0.0


def analyze_content(content: str) -> int:
    score = 0
    length = len(content)

    if length < SHORT_CONTENT_LENGTH:
        score += Weight.HIGH
    if length > LONG_CONTENT_LENGTH:
        score += Weight.MEDIUM

    uppercase_ratio = _ratio(len(_UPPERCASE.findall(content)), length)
    if uppercase_ratio > 0.8:
        score += Weight.HIGH
    elif uppercase_ratio > 0.5:
        score += Weight.MEDIUM

    if _ratio(len(_SPECIAL_CHAR.findall(content)), length) > 0.3:
        score += Weight.MEDIUM

    if _REPEATED_CHAR.search(content):
        score += Weight.MEDIUM
    if _REPEATED_PUNCTUATION.search(content):
        score += Weight.LOW

    # 날짜/시간 정도는 넘지 않는 숫자 비율
    if _ratio(len(_DIGIT.findall(content)), length) > 0.4:
        score += Weight.MEDIUM

    return int(score)


def extract_urls(content: str) -> list[str]:
    return _URL.findall(content)


def analyze_urls(content: str) -> int:
    score = 0
    urls = extract_urls(content)

    if len(urls) >= 2:
        score += Weight.HIGH
    elif len(urls) == 1:
        score += Weight.LOW

    for url in urls:
        lower_url = url.lower()
        if any(domain in lower_url for domain in SUSPICIOUS_DOMAINS):
            score += Weight.MEDIUM

    return int(score)


def analyze_author(author: str) -> int:
    score = 0
    length = len(author)

    if length < SHORT_AUTHOR_LENGTH:
        score += Weight.HIGH
    if length > LONG_AUTHOR_LENGTH:
        score += Weight.MEDIUM

    if _HANDLE_WITH_NUMBER.fullmatch(author):  # user123
        score += Weight.MEDIUM
    if _DIGITS_ONLY.fullmatch(author):
        score += Weight.HIGH
    if not _LETTER.search(author):
        score += Weight.HIGH
    if len(_DIGIT.findall(author)) > length * 0.5:
        score += Weight.MEDIUM

    is_reserved = any(p.fullmatch(author) for p in _SUSPICIOUS_NAMES)
    if is_reserved or _SUSPICIOUS_NAME_TERMS.search(author):
        score += Weight.HIGH

    return int(score)


def analyze_linguistics(content: str) -> int:
    words = content.lower().split()
    if not words:
        return int(Weight.HIGH)

    score = 0

    repetition_ratio = (len(words) - len(set(words))) / len(words)
    if repetition_ratio > 0.5:
        score += Weight.MEDIUM

    average_word_length = sum(len(word) for word in words) / len(words)
    if average_word_length < 2 or average_word_length > 15:
        score += Weight.LOW

    caps_words = [
        word
        for word in content.split()
        if len(word) > 2 and word == word.upper() and _UPPERCASE.search(word)
    ]
    if len(caps_words) > len(words) * 0.3:
        score += Weight.MEDIUM

    return int(score)
