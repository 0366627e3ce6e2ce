class UniqSeqError(Exception):
    """Base class for uniqseq-specific errors."""


# Construction
class InvalidRange(UniqSeqError, ValueError):
    pass


class InvalidSeed(UniqSeqError, ValueError):
    pass


# Validity checking
class DuplicateValueError(UniqSeqError):
    """Two positions of a produced sequence hold the same value."""

    def __init__(self, first: int, second: int, value: int):
        super().__init__(f"Sequence mismatch: seq[{first}] == seq[{second}] == {value}")
        self.first = first
        self.second = second
        self.value = value
