import random

import pytest

from services.lexicon_client import LexiconClient

BIRD_PATH = ("Bird", "Watching", "Party", "Animal", "Shelter", "Home")


class GraphLexicon(LexiconClient):
    """Lexicon stub backed by a fixed adjacency map keyed by lower-case word."""

    def __init__(self, graph: dict[str, list[str]] | None = None) -> None:
        self.graph = graph or {}
        self.calls: list[str] = []

    async def lookup_associations(self, word: str) -> list[str]:
        self.calls.append(word)
        return list(self.graph.get(word.lower(), []))


class FirstChoiceRandom(random.Random):
    """Always picks the first option and remembers what it was offered."""

    def __init__(self) -> None:
        super().__init__(0)
        self.offered: list[list] = []

    def choice(self, seq):
        self.offered.append(list(seq))
        return seq[0]


@pytest.fixture
def bird_graph():
    return {
        "bird": ["watching", "Feeder", "house"],
        "watching": ["party", "brief"],
        "party": ["animal", "line"],
        "animal": ["shelter", "farm"],
        "shelter": ["home", "dog"],
    }


@pytest.fixture
def first_choice_rng():
    return FirstChoiceRandom()
