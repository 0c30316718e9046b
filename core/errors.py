class WordChainError(Exception):
    """Base class for word chain generation errors."""


class LexiconUnavailableError(WordChainError):
    """The association service failed or answered with something unusable."""


class DeadEndError(WordChainError):
    """No usable next word could be found for the chain being built."""

    def __init__(self, reason: str, partial: list[str]):
        super().__init__(reason)
        self.reason = reason
        self.partial = list(partial)


class FallbackUnavailableError(WordChainError):
    """The fallback chain table is empty or malformed."""
