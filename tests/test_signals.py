"""Tests for sentiment, position and competitor detection."""

from __future__ import annotations

from citeprobe.core.citation import (
    DetectorConfig,
    detect_competitors,
    detect_position,
    detect_sentiment,
)
from citeprobe.core.citation.sentiment import count_keywords, extract_window
from citeprobe.core.models import Competitor, Sentiment


class TestExtractWindow:
    def test_clamps_to_text_bounds(self):
        assert extract_window("Hello Acme World", 6, 4, 100) == "hello acme world"

    def test_window_radius(self):
        text = "aaaa" + "ACME" + "bbbb"
        assert extract_window(text, 4, 4, 2) == "aaacmebb"


class TestSentiment:
    """Keyword counts around the match decide sentiment."""

    def test_positive(self):
        assert detect_sentiment("Acme is excellent and reliable", 0, 4) == Sentiment.positive

    def test_negative(self):
        text = "Avoid Acme, it is outdated and frustrating"
        assert detect_sentiment(text, 6, 4) == Sentiment.negative

    def test_tie_is_neutral(self):
        assert detect_sentiment("Acme is great but overpriced", 0, 4) == Sentiment.neutral

    def test_no_keywords_is_neutral(self):
        assert detect_sentiment("Acme exists", 0, 4) == Sentiment.neutral

    def test_keywords_match_inside_longer_words(self):
        """'best' counts inside 'bestseller'."""
        assert detect_sentiment("Acme is a bestseller", 0, 4) == Sentiment.positive

    def test_unreliable_scores_both_lists(self):
        """'unreliable' contains 'reliable', so the two keywords cancel out."""
        assert detect_sentiment("Acme is unreliable", 0, 4) == Sentiment.neutral

    def test_keyword_outside_window_ignored(self):
        text = "Acme" + " " * 200 + "excellent"
        assert detect_sentiment(text, 0, 4) == Sentiment.neutral

    def test_custom_window(self):
        text = "Acme" + " " * 200 + "excellent"
        config = DetectorConfig(sentiment_window=300)
        assert detect_sentiment(text, 0, 4, config) == Sentiment.positive

    def test_each_keyword_scores_once(self):
        assert count_keywords("great great great", ("great",)) == 1


class TestPosition:
    """Numbered list lines yield the brand's rank."""

    def test_first_item(self):
        assert detect_position("1. Acme\n2. Beta\n3. Gamma", "Acme") == 1

    def test_later_item_with_paren_marker(self):
        response = "Top picks:\n1) Beta\n2) Acme Cloud\n3) Gamma"
        assert detect_position(response, "Acme") == 2

    def test_marker_variants(self):
        assert detect_position("  7: Acme", "Acme") == 7
        assert detect_position("12) Acme", "Acme") == 12
        assert detect_position("4- Acme", "Acme") == 4

    def test_marker_must_follow_digits(self):
        assert detect_position("1 - Acme", "Acme") is None

    def test_matches_domain(self):
        assert detect_position("1. Beta\n2. see acme.com", "Zeta", "acme.com") == 2

    def test_case_insensitive_and_unanchored(self):
        assert detect_position("3. The tool from ACME", "Acme") == 3

    def test_first_qualifying_line_wins(self):
        assert detect_position("5. Acme\n1. Acme", "Acme") == 5

    def test_no_numbered_lines(self):
        assert detect_position("Acme is the best option.", "Acme") is None

    def test_brand_not_in_list(self):
        assert detect_position("1. Beta\n2. Gamma", "Acme", "acme.com") is None

    def test_three_digit_numbers_not_list_markers(self):
        assert detect_position("100. Acme", "Acme") is None

    def test_empty_identifiers(self):
        assert detect_position("1. Acme", "", "") is None

    def test_metacharacters_escaped(self):
        assert detect_position("1. C++ tools\n2. Rust", "C++") == 1


class TestCompetitors:
    """Competitor co-mentions keep the configured order."""

    def test_input_order_preserved(self):
        competitors = [
            Competitor(name="Alpha"),
            Competitor(name="Bravo"),
            Competitor(name="Charlie"),
        ]
        assert detect_competitors("Bravo beats Alpha easily", competitors) == ("Alpha", "Bravo")

    def test_domain_only(self):
        competitors = [Competitor(name="Echo Systems", domain="echo.dev")]
        assert detect_competitors("Look at echo.dev", competitors) == ("Echo Systems",)

    def test_case_insensitive(self):
        assert detect_competitors("BRAVO rocks", [Competitor(name="bravo")]) == ("bravo",)

    def test_empty_domain_never_matches(self):
        assert detect_competitors("nothing here", [Competitor(name="Foxtrot", domain="")]) == ()

    def test_no_competitors(self):
        assert detect_competitors("Alpha", []) == ()
