"""Closed word lists for the English profile."""

from typing import Final

CONTRACTIONS: Final[frozenset[str]] = frozenset(
    {
        "i'm", "you're", "he's", "she's", "it's", "we're", "they're",
        "i've", "you've", "we've", "they've",
        "i'll", "you'll", "he'll", "she'll", "it'll", "we'll", "they'll",
        "i'd", "you'd", "he'd", "she'd", "it'd", "we'd", "they'd",
        "isn't", "aren't", "wasn't", "weren't", "haven't", "hasn't", "hadn't",
        "won't", "wouldn't", "don't", "doesn't", "didn't", "can't", "couldn't",
        "shouldn't", "mightn't", "mustn't", "let's", "that's", "who's",
        "what's", "here's", "there's", "where's", "when's", "why's", "how's",
    }
)  # fmt: skip

PERSONAL_PRONOUNS: Final[frozenset[str]] = frozenset(
    {
        "i", "me", "my", "mine", "myself",
        "you", "your", "yours", "yourself",
        "he", "him", "his", "himself",
        "she", "her", "hers", "herself",
        "we", "us", "our", "ours", "ourselves",
        "they", "them", "their", "theirs", "themselves",
    }
)  # fmt: skip
