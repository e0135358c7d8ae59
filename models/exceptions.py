"""
Exceptions raised while building and publishing the pairings page.
"""


class PairingsError(Exception):
    """Base class for pairings publisher errors."""


class SourceUnavailableError(PairingsError):
    """The export file is missing or too short to contain tournament data."""


class StructuralIncompletenessError(PairingsError):
    """The export parses but lacks the roster or the rounds."""


class MissingDataError(PairingsError):
    """A required collection was empty where data was expected."""


class PublishError(PairingsError):
    """The rendered page could not be transferred to the remote host."""
