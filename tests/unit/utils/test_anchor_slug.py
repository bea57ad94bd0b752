#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_anchor_slug.py
"""Unit tests for the default heading anchor slug."""

import pytest

from mmarkfmt.utils.text import sanitize_anchor_name


@pytest.mark.unit
class TestSanitizeAnchorName:
    """Tests for sanitize_anchor_name."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Title", "title"),
            ("My Heading Title", "my-heading-title"),
            ("Hello, World!", "hello-world"),
            ("  API v2.0 ", "api-v2-0"),
            ("Hello *World*", "hello-world"),
            ("a -- b", "a-b"),
            ("Über Größe", "über-größe"),
            ("123", "123"),
        ],
    )
    def test_slug(self, text, expected):
        assert sanitize_anchor_name(text) == expected

    @pytest.mark.parametrize("text", ["", "***", "   ", "!?"])
    def test_empty_slug(self, text):
        assert sanitize_anchor_name(text) == "empty"
