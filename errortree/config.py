"""Configuration for errortree.

This module defines how callers describe the shape of their error objects:
which method names expose children and custom matching, and which exception
chaining attributes count as a wrapped child.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class MatchConfig:
    """How nodes of an error tree are classified.

    The defaults describe plain Python exceptions: ``raise ... from ...``
    chains (``__cause__``) and ``ExceptionGroup`` containers, plus any
    object exposing ``unwrap()`` and ``matches()`` methods.
    """

    # Duck-typed capability method names
    match_method: str = "matches"      # matches(target) -> bool
    unwrap_method: str = "unwrap"      # unwrap() -> node | None | list | tuple

    # Exception chaining
    follow_cause: bool = True          # __cause__ is a single child
    follow_context: bool = False       # fall back to __context__

    # Cut branches that revisit a node on the current path
    detect_cycles: bool = True

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for field_name in ("match_method", "unwrap_method"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                errors.append(f"{field_name} must be a non-empty string")
            elif not value.isidentifier():
                errors.append(
                    f"{field_name} must be a valid identifier, got {value!r}"
                )

        if self.match_method == self.unwrap_method:
            errors.append(
                "match_method and unwrap_method must differ "
                f"(both are {self.match_method!r})"
            )

        if self.follow_context and not self.follow_cause:
            # __context__ is only a fallback for a missing __cause__
            errors.append("follow_context requires follow_cause")

        return errors


DEFAULT_CONFIG = MatchConfig()
