"""Question to motion rewriting.

Only ever used to build a suggestion; the user's text is never replaced.
"""

import re
from collections.abc import Callable

_Rewrite = Callable[[re.Match[str]], str]

# Ordered; the first matching rule wins.
_RULES: list[tuple[re.Pattern[str], _Rewrite]] = [
    (
        re.compile(r"^should we (?P<rest>.+?)\s*\?+$", re.IGNORECASE),
        lambda m: f"We should {m['rest']}.",
    ),
    (
        re.compile(r"^should (?P<subject>.+?) be (?P<rest>.+?)\s*\?+$", re.IGNORECASE),
        lambda m: f"{m['subject']} should be {m['rest']}.",
    ),
    (
        re.compile(
            r"^is (?P<subject>.+?) (?P<article>a|an|the) (?P<rest>.+?)\s*\?+$",
            re.IGNORECASE,
        ),
        lambda m: f"{m['subject']} is {m['article'].lower()} {m['rest']}.",
    ),
    # Only "Is/Are <one or two words> <one word>?" has an unambiguous split;
    # longer questions are left for the generic suggestion.
    (
        re.compile(
            r"^(?P<verb>is|are) (?P<subject>\S+(?: \S+)?) (?P<rest>\S+?)\s*\?+$",
            re.IGNORECASE,
        ),
        lambda m: f"{m['subject']} {m['verb'].lower()} {m['rest']}.",
    ),
    (
        re.compile(r"^can (?P<subject>\S+) (?P<rest>.+?)\s*\?+$", re.IGNORECASE),
        lambda m: f"{m['subject']} can {m['rest']}.",
    ),
]


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def normalize_motion(text: str) -> str:
    """Rewrite a yes/no question as a declarative motion.

    Declarative or unmatched text comes back unchanged, which also makes the
    function idempotent: every rewrite ends in a period.
    """
    stripped = text.strip()
    for pattern, rewrite in _RULES:
        match = pattern.match(stripped)
        if match:
            return _capitalize_first(rewrite(match))
    return text


def is_question(text: str) -> bool:
    return text.strip().endswith("?")
