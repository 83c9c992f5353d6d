"""Exceptions raised by errortree.

Ordinary non-matches are never raised; they come back as ``False`` or an
empty list. The exceptions here signal misuse of the library itself.
"""


class ErrorTreeError(Exception):
    """Base class for errors raised by errortree."""
    pass


class InvalidTargetError(ErrorTreeError, TypeError):
    """Raised when a scan target can never match an error node.

    A target must be an interface-like type (``object``, ``typing.Any``,
    an abstract base class or a runtime-checkable Protocol) or a concrete
    ``BaseException`` subclass.
    """

    def __init__(self, target, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(
            f"errortree: target must be an interface or an error type, "
            f"got {target!r} ({reason})"
        )


class ConfigurationError(ErrorTreeError, ValueError):
    """Raised when a MatchConfig fails validation."""
    pass
