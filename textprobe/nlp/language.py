"""Module with the script-based language discriminator."""

import re

from textprobe.data_models import Language
from textprobe.nlp.tokeniser import GREEK_EXTENDED_LETTERS

# Greek and Coptic plus Greek Extended (polytonic) blocks. The Greek and Coptic
# block also holds punctuation and accents, so matches are filtered to letters.
GREEK_LETTER = re.compile(rf"[Ͱ-Ͽ{GREEK_EXTENDED_LETTERS}]")
# Basic Latin letters plus Latin-1 Supplement and Latin Extended-A letters.
LATIN_LETTER = re.compile(r"[A-Za-zÀ-ÖØ-öø-ſ]")


def detect_language(text: str) -> Language:
    """
    Detect a language of a text by counting letters of each script.

    Args:
        text (str): The text to be classified.

    Returns:
        Language: `greek` if there are strictly more Greek letters than Latin ones,
            `english` otherwise (including ties and empty texts).
    """
    greek_letters = sum(
        character.isalpha() for character in GREEK_LETTER.findall(text)
    )
    latin_letters = len(LATIN_LETTER.findall(text))
    if greek_letters > latin_letters:
        return "greek"
    return "english"
