"""Unit tests for removal of markdown and HTML formatting."""

import pytest

from textprobe.nlp.sanitiser import sanitise


@pytest.mark.unit
class TestSanitise:
    """Test that only prose survives sanitisation."""

    def test_plain_text_is_unchanged(self) -> None:
        """Test a text without formatting is returned as is."""
        text = "Just a plain sentence. And another one!"

        assert sanitise(text) == text

    def test_headers_and_emphasis(self) -> None:
        """Test headers, bold and italics are unwrapped."""
        text = "# Title\n\n**Bold** and *italic* text."

        assert sanitise(text) == "Title\n\nBold and italic text."

    def test_bullets_and_numbered_lists(self) -> None:
        """Test list markers are removed."""
        assert sanitise("- one\n- two\n1. three\n2) four") == "one\ntwo\nthree\nfour"

    def test_links_keep_text_and_images_are_removed(self) -> None:
        """Test links are replaced with their text and images disappear."""
        text = "See [the docs](https://example.com). ![logo](logo.png)"

        assert sanitise(text) == "See the docs."

    def test_html_tags(self) -> None:
        """Test HTML tags are stripped."""
        assert sanitise("<p>Hello <b>there</b></p>") == "Hello there"

    def test_code_blocks(self) -> None:
        """Test fenced code blocks are removed entirely."""
        text = "Before\n```python\nx = 1\n```\nAfter"

        assert sanitise(text) == "Before\n\nAfter"

    def test_blank_lines_are_collapsed(self) -> None:
        """Test runs of blank lines and spaces are collapsed."""
        assert sanitise("One.\n\n\n\nTwo.   Three.") == "One.\n\nTwo. Three."
