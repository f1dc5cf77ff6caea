"""
Exception types for the reactions engine.
"""


class ReactionsError(Exception):
    """Base class for all reactions errors."""
    pass


class ConfigurationError(ReactionsError):
    """Raised at registration time when a reaction declaration is invalid."""
    pass


class UnknownActionError(ReactionsError):
    """Raised when an action is requested by a name that was never registered."""
    pass


class ActionLogError(ReactionsError):
    """Raised when an action log cannot be read or parsed."""
    pass


class ReplayError(ReactionsError):
    """Raised when an action record cannot be replayed."""
    pass
