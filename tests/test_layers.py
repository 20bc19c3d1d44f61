"""Tests for the individual detection layers."""

from __future__ import annotations

from citeprobe.core.citation import DEFAULT_DETECTOR_CONFIG as CFG
from citeprobe.core.citation.layers import (
    URL_PATTERN,
    classify_context,
    match_domain,
    match_exact_name,
    match_partial_name,
    match_url,
)
from citeprobe.core.models import CitationType


class TestUrlLayer:
    def test_url_token_stops_at_brackets(self):
        text = "(https://acme.com) and <http://beta.com/x>"
        assert URL_PATTERN.findall(text) == ["https://acme.com", "http://beta.com/x"]

    def test_domain_in_path_counts(self):
        match = match_url("Read https://review.site/acme.com-review", "Acme", "acme.com", CFG)
        assert match is not None
        assert match.citation_type == CitationType.url_link

    def test_uppercase_url(self):
        assert match_url("HTTPS://ACME.COM/", "Acme", "acme.com", CFG) is not None

    def test_other_domain(self):
        assert match_url("https://beta.com", "Acme", "acme.com", CFG) is None

    def test_sentiment_anchor_is_domain_text(self):
        text = "Go to https://acme.com"
        match = match_url(text, "Acme", "acme.com", CFG)
        assert match.start == text.index("acme.com")
        assert match.length == len("acme.com")

    def test_bare_domain_is_not_a_url(self):
        assert match_url("acme.com is nice", "Acme", "acme.com", CFG) is None


class TestNameLayers:
    def test_exact_requires_word_boundary(self):
        assert match_exact_name("Google", "Go", "", CFG) is None
        assert match_partial_name("Google", "Go", "", CFG) is not None

    def test_exact_across_punctuation(self):
        match = match_exact_name("Acme's pricing", "Acme", "", CFG)
        assert match is not None
        assert match.start == 0

    def test_partial_reports_index(self):
        match = match_partial_name("the SuperAcmeX suite", "acme", "", CFG)
        assert match.start == 9
        assert match.citation_type == CitationType.direct_mention

    def test_empty_name_never_matches(self):
        assert match_exact_name("anything", "", "", CFG) is None
        assert match_partial_name("anything", "", "", CFG) is None


class TestDomainLayer:
    def test_bare_domain(self):
        match = match_domain("see ACME.com", "", "acme.com", CFG)
        assert match.start == 4

    def test_empty_domain_never_matches(self):
        assert match_domain("anything", "Acme", "", CFG) is None


class TestClassifyContext:
    def test_keywords_match_as_substrings(self):
        """'vs' inside 'devs' still reads as a comparison."""
        text = "Acme for devs"
        assert classify_context(text, 0, 4, CFG) == CitationType.comparison

    def test_direct_mention_default(self):
        assert classify_context("Acme ships", 0, 4, CFG) == CitationType.direct_mention

    def test_keyword_outside_window(self):
        text = "Acme" + "." * 250 + " we recommend it"
        assert classify_context(text, 0, 4, CFG) == CitationType.direct_mention
