"""
Parsing of raw Gemini text into an ordered list of suggestions.
"""
import re
from typing import Iterable, List

from moodreply.core.constants import SuggestionConfig

NUMBERED_LINE = re.compile(r"^\d+\.")
NUMBER_PREFIX = re.compile(r"^\d+\.\s*")


def parse_suggestions(raw_text: str, limit: int = SuggestionConfig.MAX_SUGGESTIONS) -> List[str]:
    """
    Extract numbered lines ("1. ...", "2. ...") from model output.

    Lines without a leading number are ignored, the numeric prefix is
    stripped and empty results are dropped. At most `limit` entries are
    returned, in source order; fewer (even none) is a valid result.
    """
    suggestions: List[str] = []
    for line in raw_text.splitlines():
        stripped = line.strip()
        if not NUMBERED_LINE.match(stripped):
            continue
        text = NUMBER_PREFIX.sub("", stripped).strip()
        if text:
            suggestions.append(text)
    return suggestions[:limit]


def format_numbered_lines(suggestions: Iterable[str]) -> str:
    """Render suggestions back into "N. text" lines."""
    return "\n".join(f"{index}. {text}" for index, text in enumerate(suggestions, start=1))
