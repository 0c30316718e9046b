import random

import pytest

from core.errors import FallbackUnavailableError
from repositories.fallback_repo import FALLBACK_CHAINS, FallbackChainRepository
from services.candidate_filter import is_valid_chain


def test_table_has_at_least_ten_well_formed_chains():
    repo = FallbackChainRepository()

    assert len(repo.all_chains()) >= 10
    assert all(is_valid_chain(chain) for chain in repo.all_chains())
    assert repo.all_chains()[0] == ("Bird", "Watching", "Party", "Animal", "Shelter", "Home")


def test_random_chain_reaches_every_entry():
    repo = FallbackChainRepository(rng=random.Random(1234))

    drawn = [repo.random_chain() for _ in range(2000)]

    assert set(drawn) == set(FALLBACK_CHAINS)
    assert all(len(chain) == 6 and all(w.isalpha() for w in chain) for chain in drawn)


def test_same_seed_gives_same_sequence():
    first = FallbackChainRepository(rng=random.Random(42))
    second = FallbackChainRepository(rng=random.Random(42))

    assert [first.random_chain() for _ in range(10)] == [second.random_chain() for _ in range(10)]


def test_empty_table_is_rejected():
    with pytest.raises(FallbackUnavailableError):
        FallbackChainRepository(chains=[])


@pytest.mark.parametrize(
    "chain",
    [
        ("Bird", "Watching", "Party", "Animal", "Shelter"),
        ("Bird", "watching", "Party", "Animal", "Shelter", "Home"),
        ("Bird", "Watching", "Party", "Bird", "Shelter", "Home"),
        ("Bird", "Watch-ing", "Party", "Animal", "Shelter", "Home"),
    ],
)
def test_malformed_chain_is_rejected(chain):
    with pytest.raises(FallbackUnavailableError):
        FallbackChainRepository(chains=[FALLBACK_CHAINS[1], chain])
