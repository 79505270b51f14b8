class RecommenderError(Exception):
    """Base class for errors raised by the recommendation engine."""


class DataIntegrityError(RecommenderError):
    """A raw record references an identifier missing from its table, or is malformed."""


class NotFoundError(RecommenderError):
    """The requested user identifier has no corresponding user."""


class InvalidArgumentError(RecommenderError):
    """A value supplied at the query boundary is non-numeric or out of range."""
