class InvalidFishColorError(ValueError):
    """Raised when a School is asked about something that is not a fish color."""


class InvalidLayoutError(ValueError):
    """Raised when a starting layout does not place every fish exactly once."""
