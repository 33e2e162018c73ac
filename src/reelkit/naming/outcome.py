"""Tagged outcomes for pattern operations.

Every pattern operation in reelkit degrades gracefully: an unparseable name
is never an error. The outcome types make the difference between "a rule
matched and produced this value" and "nothing matched, here is the
fallback" explicit, even when both carry the same string.

Example usage:
    outcome = match_reel_clip("A001C003.mov")
    if outcome.matched:
        logger.info("Matched %s via %s", outcome.value, outcome.rule)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Matched(Generic[T]):
    """A pattern rule matched.

    Attributes:
        value: Value produced by the matching rule.
        rule: Name of the rule that matched, if the operation has named rules.
    """

    value: T
    rule: str | None = None

    matched: ClassVar[bool] = True

    def value_or(self, default: T) -> T:
        """Return the matched value (the default is ignored)."""
        return self.value


@dataclass(frozen=True)
class Unmatched(Generic[T]):
    """No pattern rule matched.

    Attributes:
        value: Fallback value for callers that want the sentinel form
            (usually the unchanged input, 0, or None).
    """

    value: T

    matched: ClassVar[bool] = False
    rule: ClassVar[None] = None

    def value_or(self, default: T) -> T:
        """Return the given default instead of the fallback value."""
        return default


Outcome = Union[Matched[T], Unmatched[T]]
