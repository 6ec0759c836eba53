"""Exceptions raised while loading and querying airfield data."""


class AirfieldsError(Exception):
    """Base class for airfields errors."""


class LoadError(AirfieldsError):
    """A source row or header could not be parsed. Aborts the whole load."""

    def __init__(self, source: str, row: int, reason: str):
        self.source = source
        self.row = row
        self.reason = reason
        super().__init__(f"{source}: row {row}: {reason}")


class ReferentialError(LoadError):
    """A foreign key points at an entity that was never loaded."""


class PreconditionError(AirfieldsError):
    """Query or report invoked without a successfully loaded index."""
