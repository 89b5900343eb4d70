"""Heuristics that strip a model's visible reasoning from the start of its answer.

Pattern based: phrasings not listed here are left alone, and a numbered line
more than ``MAX_PREAMBLE_OFFSET`` characters in is always taken as the start
of the answer, even when the text before it is legitimate content.
"""
from __future__ import annotations
import re
from typing import Callable

MAX_PREAMBLE_OFFSET = 50

# A filler preamble ends at the first blank line, or just before the first
# bold marker or numbered item, whichever comes first.
_STOP = r"(?:\n[ \t]*\n|(?=\*\*)|(?=^[ \t]*\d+[.)][ \t]))"

_EN_FILLERS = r"let me think|let me see|let's see|okay|ok|alright|hmm|well|so"
_ES_FILLERS = r"vamos a ver|déjame pensar|déjame ver|de acuerdo|veamos|vale|bueno|entonces"

_FLAGS = re.IGNORECASE | re.DOTALL | re.MULTILINE

# Consecutive filler paragraphs in either language form one preamble.
_FILLER_RUN = rf"(?:(?:{_EN_FILLERS}|{_ES_FILLERS})\b.*?{_STOP})"

PREAMBLE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf"\A<think>.*?</think>\s*{_FILLER_RUN}*", _FLAGS),
    re.compile(rf"\A{_FILLER_RUN}+", _FLAGS),
]

_LIST_MARKER = re.compile(r"^[ \t]*(?:\d+[.)]|-)[ \t]", re.MULTILINE)


def strip_preamble(text: str) -> str:
    """
    Remove a leading chain-of-thought preamble from generated text.

    At most one of ``PREAMBLE_PATTERNS`` is applied. Then, if the first list
    marker sits past ``MAX_PREAMBLE_OFFSET``, everything before it is dropped.
    """
    text = text.strip()
    for pattern in PREAMBLE_PATTERNS:
        m = pattern.match(text)
        if m:
            text = text[m.end():].strip()
            break

    marker = _LIST_MARKER.search(text)
    if marker and marker.start() > MAX_PREAMBLE_OFFSET:
        text = text[marker.start():]
    return text.strip()


def no_cleanup(text: str) -> str:
    return text.strip()


CLEANUPS: dict[str, Callable[[str], str]] = {
    "none": no_cleanup,
    "strip_preamble": strip_preamble,
}
