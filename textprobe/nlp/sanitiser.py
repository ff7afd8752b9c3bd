"""Module with a text sanitiser."""

import re

# Ordered (pattern, replacement) pairs. Images go before links, bold before italics.
_FORMATTING_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"```.*?```", flags=re.DOTALL), ""),
    (re.compile(r"<[^>]+>"), ""),
    (re.compile(r"^#{1,6}\s+", flags=re.MULTILINE), ""),
    (re.compile(r"!\[([^\]]*)\]\([^\)]+\)"), ""),
    (re.compile(r"\[([^\]]+)\]\([^\)]+\)"), r"\1"),
    (re.compile(r"\*\*([^*]+)\*\*"), r"\1"),
    (re.compile(r"\*([^*]+)\*"), r"\1"),
    (re.compile(r"__([^_]+)__"), r"\1"),
    (re.compile(r"`([^`]+)`"), r"\1"),
    (re.compile(r"^\s*[\*\-\+•]\s+", flags=re.MULTILINE), ""),
    (re.compile(r"^\s*\d+[\.\)]\s+", flags=re.MULTILINE), ""),
    (re.compile(r"^\s*>\s+", flags=re.MULTILINE), ""),
    (re.compile(r"^[\-\*_]{3,}\s*$", flags=re.MULTILINE), ""),
    (re.compile(r"[ \t]+"), " "),
    (re.compile(r"\n{3,}"), "\n\n"),
)


def sanitise(text: str) -> str:
    """
    Remove markdown and HTML formatting so that only prose is analysed.

    List bullets, emphasis markers and headers would otherwise count as
    punctuation and sentence fragments.

    Args:
        text (str): Raw text potentially containing formatting.

    Returns:
        str: Cleaned text with only content and natural punctuation.
    """
    for pattern, replacement in _FORMATTING_RULES:
        text = pattern.sub(replacement, text)

    text = "\n".join(line.strip() for line in text.split("\n"))
    return text.strip()
