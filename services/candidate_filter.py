import re
from typing import Iterable

CHAIN_LENGTH = 6
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 12
DEFAULT_CANDIDATE_LIMIT = 15

_ALPHA_RE = re.compile(r"^[A-Za-z]+$")
_CHAIN_WORD_RE = re.compile(r"^[A-Z][a-z]+$")


def normalize_word(text: str) -> str:
    return text.strip().lower().capitalize()


def is_valid_word(text: str) -> bool:
    stripped = text.strip()
    if not _ALPHA_RE.fullmatch(stripped):
        return False
    return MIN_WORD_LENGTH <= len(stripped) <= MAX_WORD_LENGTH


def is_valid_chain(words: Iterable[str], length: int = CHAIN_LENGTH) -> bool:
    """Check the shape of a finished chain: size, capitalization and no repeats."""
    words = list(words)
    if len(words) != length:
        return False
    if not all(isinstance(w, str) and _CHAIN_WORD_RE.fullmatch(w) for w in words):
        return False
    return len({w.lower() for w in words}) == len(words)


def filter_candidates(
    raw: Iterable[object],
    already_used: Iterable[str],
    limit: int = DEFAULT_CANDIDATE_LIMIT,
) -> list[str]:
    """Turn raw association results into usable chain extensions.

    Keeps the service's rank order, drops anything that is not a single
    alphabetic word of acceptable length, and drops words already in the
    chain. Repeats inside one batch ("fly", "FLY") collapse to the first one.
    """
    seen = {word.strip().lower() for word in already_used}
    candidates: list[str] = []
    for item in raw:
        if len(candidates) >= limit:
            break
        if not isinstance(item, str) or not is_valid_word(item):
            continue
        word = normalize_word(item)
        key = word.lower()
        if key in seen:
            continue
        seen.add(key)
        candidates.append(word)
    return candidates
