import random
from typing import Iterable

from core.errors import FallbackUnavailableError
from services.candidate_filter import is_valid_chain

# Every adjacent pair is a common phrase or compound (Bird Watching, Watching Party, ...).
FALLBACK_CHAINS: tuple[tuple[str, ...], ...] = (
    ("Bird", "Watching", "Party", "Animal", "Shelter", "Home"),
    ("Fire", "Truck", "Stop", "Sign", "Language", "Barrier"),
    ("Snow", "Ball", "Game", "Show", "Business", "Card"),
    ("Coffee", "Table", "Tennis", "Court", "House", "Party"),
    ("Sun", "Light", "House", "Work", "Shop", "Floor"),
    ("Water", "Fall", "Season", "Ticket", "Office", "Chair"),
    ("Rain", "Bow", "Tie", "Break", "Dance", "Floor"),
    ("Apple", "Juice", "Box", "Office", "Space", "Station"),
    ("Head", "Line", "Dance", "Class", "Room", "Mate"),
    ("Book", "Shelf", "Life", "Boat", "House", "Key"),
    ("Back", "Pack", "Horse", "Power", "Plant", "Food"),
    ("Hand", "Shake", "Down", "Town", "Hall", "Pass"),
    ("Foot", "Ball", "Park", "Bench", "Press", "Release"),
    ("Honey", "Moon", "Light", "Year", "Book", "Worm"),
)


class FallbackChainRepository:
    def __init__(
        self,
        chains: Iterable[Iterable[str]] = FALLBACK_CHAINS,
        rng: random.Random | None = None,
    ):
        self.chains = tuple(tuple(chain) for chain in chains)
        self.rng = rng or random.Random()
        if not self.chains:
            raise FallbackUnavailableError("Fallback chain table is empty")
        for index, chain in enumerate(self.chains):
            if not is_valid_chain(chain):
                raise FallbackUnavailableError(f"Fallback chain #{index} is malformed: {chain!r}")

    def random_chain(self) -> tuple[str, ...]:
        return self.rng.choice(self.chains)

    def all_chains(self) -> tuple[tuple[str, ...], ...]:
        return self.chains
