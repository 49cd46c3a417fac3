import time

from newsroom.spam.indicators import TIERS, Weight, _ordered, score_against_catalog


class TestTiers:
    def test_weights(self):
        assert [tier.weight for tier in TIERS] == [10, 5, 3, 1]
        assert Weight.CRITICAL == 10
        assert Weight.LOW == 1

    def test_keywords_are_lowercase(self):
        for tier in TIERS:
            assert all(keyword == keyword.lower() for keyword in tier.keywords)

    def test_low_tier_has_no_patterns(self):
        assert TIERS[-1].patterns == ()


class TestScoreAgainstCatalog:
    def test_clean_text(self):
        assert score_against_catalog("Thanks for the thoughtful piece", "Jane") == (
            0,
            [],
        )

    def test_critical_keyword(self):
        score, reasons = score_against_catalog("buy viagra here", "Jane")
        assert score == 10
        assert reasons == ['Critical spam keyword: "viagra"']

    def test_keyword_is_case_insensitive(self):
        score, _ = score_against_catalog("VIAGRA", "Jane")
        assert score >= 10

    def test_keyword_in_author(self):
        score, reasons = score_against_catalog("Nice read", "casino king")
        assert score == 5
        assert reasons == ['High-risk keyword: "casino" in author name']

    def test_body_and_author_both_count(self):
        score, reasons = score_against_catalog("casino", "casino")
        assert score == 10
        assert len(reasons) == 2

    def test_low_keywords_ignore_author(self):
        score, reasons = score_against_catalog("great deal", "deal")
        assert score == 1
        assert reasons == ['Low-risk keyword: "deal"']

    def test_pattern_and_keywords(self):
        score, reasons = score_against_catalog("Visit our website", "Bob")
        assert score == 7
        assert reasons == [
            "High-risk pattern detected",
            'Low-risk keyword: "website"',
            'Low-risk keyword: "visit"',
        ]

    def test_pattern_in_author(self):
        score, reasons = score_against_catalog("Nice read", "win cash")
        assert score == 5
        assert reasons == ["High-risk pattern detected in author name"]

    def test_medium_keyword_in_author(self):
        score, reasons = score_against_catalog("Nice read", "Act Now Sam")
        assert score == 3
        assert reasons == ['Medium-risk keyword: "act now" in author name']

    def test_long_adversarial_body_is_fast(self):
        body = ("make $1 " * 1250)[:10_000]
        started = time.perf_counter()
        score_against_catalog(body, "Jane")
        assert time.perf_counter() - started < 2.0


class TestOrderedPattern:
    pattern = _ordered(r"(?:make|earn)", r"\$\d+", r"(?:fast|quick)")

    def test_in_order(self):
        assert self.pattern.search("Make $100 really FAST") is True

    def test_out_of_order(self):
        assert self.pattern.search("fast: make $100") is False

    def test_steps_do_not_overlap(self):
        assert _ordered(r"now", r"now").search("now") is False
        assert _ordered(r"now", r"now").search("now and now") is True

    def test_same_line_only(self):
        assert self.pattern.search("make $100\nfast") is False
        assert self.pattern.search("hello\nearn $5 quick") is True

    def test_word_boundary_uses_surrounding_text(self):
        pattern = _ordered(r"\b(?:viagra|cialis)\b", r"(?:cheap|buy|order)")
        assert pattern.search("viagra cheap") is True
        assert pattern.search("xviagra cheap") is False
