"""Project-specific exceptions."""


class GenExamplesError(Exception):
    """Base exception for the project."""


class InvalidArgumentsError(GenExamplesError):
    """Raised when command-line values fail validation."""


class EmptyCityPoolError(GenExamplesError):
    """Raised when rows are requested but there are no cities to sample from."""


class CityPoolExhaustedError(GenExamplesError):
    """Raised when no new unique city name is found within the retry bound."""


class OutputFlushError(GenExamplesError):
    """Raised when buffered output cannot be flushed to the sink."""
