"""SDK exception hierarchy."""


class SquidError(Exception):
    """Base error for all deployment API failures."""


class SquidAuthError(SquidError):
    """Invalid or missing API key."""


class SquidNotFoundError(SquidError):
    """Requested resource does not exist."""


class SquidRateLimitError(SquidError):
    """Too many requests."""


class SquidServerError(SquidError):
    """The API answered with a 5xx status."""
