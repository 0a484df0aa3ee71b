"""
Text helpers shared by the report projections: word truncation, severity
colors and yes/no flags.
"""
import re
from typing import Dict

from os_list.domain.models import Cell, ColorClass, Severity

ELLIPSIS = "..."

# A word starts with a letter and may continue with letters, apostrophes and
# inner hyphens. Digits and punctuation separate words.
WORD_PATTERN = re.compile(r"[^\W\d_](?:[^\W\d_]|'|-+(?=[^\W\d_]|'))*")

SEVERITY_COLORS: Dict[str, ColorClass] = {
    Severity.CRITICAL.value: ColorClass.RED,
    Severity.HIGH.value: ColorClass.AMBER,
    Severity.MODERATE.value: ColorClass.GREEN,
}
DEFAULT_SEVERITY_COLOR = ColorClass.BLUE


def count_words(text: str) -> int:
    return sum(1 for _ in WORD_PATTERN.finditer(text))


def truncate_words(text: str, word_limit: int = 10) -> str:
    """
    Clips text so that it holds at most ``word_limit`` words.

    The text is cut where the first word past the limit begins and an
    ellipsis is appended. Text that is already short enough, and any text when
    ``word_limit`` is not positive, is returned unchanged.
    """
    if word_limit <= 0 or count_words(text) <= word_limit:
        return text

    words = WORD_PATTERN.finditer(text)
    for _ in range(word_limit):
        next(words)
    cut = next(words).start()

    return text[:cut] + ELLIPSIS


def severity_color(severity: str) -> ColorClass:
    """Maps an advisory severity to its color. Unknown severities are blue."""
    return SEVERITY_COLORS.get(severity, DEFAULT_SEVERITY_COLOR)


def flag_cell(value: bool) -> Cell:
    if value:
        return Cell.of("Yes", ColorClass.GREEN)
    return Cell.of("No", ColorClass.RED)
