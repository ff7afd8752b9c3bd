"""Unit tests for sentence splitting."""

import pytest

from textprobe.nlp.sentence_splitter import PunctuationSentenceSplitter


@pytest.mark.unit
class TestPunctuationSentenceSplitter:
    """Test splitting at terminal punctuation."""

    def test_mixed_terminators(self) -> None:
        """Test full stops, exclamation and question marks end sentences."""
        splitter = PunctuationSentenceSplitter()

        sentences = splitter.split_into_sentences(
            "First sentence. Second sentence! Third sentence?"
        )

        assert sentences == ["First sentence.", "Second sentence!", "Third sentence?"]

    def test_text_without_terminator_is_one_sentence(self) -> None:
        """Test a text without terminal punctuation is a single sentence."""
        splitter = PunctuationSentenceSplitter()

        assert splitter.split_into_sentences("Hello") == ["Hello"]

    def test_blank_text_has_no_sentences(self) -> None:
        """Test empty and whitespace-only texts have no sentences."""
        splitter = PunctuationSentenceSplitter()

        assert splitter.split_into_sentences("") == []
        assert splitter.split_into_sentences("   \n ") == []

    def test_terminator_without_whitespace_does_not_split(self) -> None:
        """Test decimals and abbreviations glued to the next word are not cut."""
        splitter = PunctuationSentenceSplitter()

        assert splitter.split_into_sentences("Pi is 3.14 roughly.") == [
            "Pi is 3.14 roughly."
        ]

    def test_greek_question_mark(self) -> None:
        """Test custom terminators such as the Greek question mark."""
        splitter = PunctuationSentenceSplitter(".!?;\u037e")

        sentences = splitter.split_into_sentences("Τι κάνεις; Καλά είμαι.")

        assert sentences == ["Τι κάνεις;", "Καλά είμαι."]

    def test_newlines_separate_sentences(self) -> None:
        """Test any whitespace after a terminator splits."""
        splitter = PunctuationSentenceSplitter()

        assert len(splitter.split_into_sentences("One.\nTwo.\n\nThree.")) == 3
