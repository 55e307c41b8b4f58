"""Three-valued facts: known true, known false, or unknown."""

from enum import Enum
from typing import Any, Optional


class TriState(str, Enum):
    TRUE = "TRUE"
    FALSE = "FALSE"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_json(cls, value: Any) -> "TriState":
        """Map a JSON value to a TriState.

        Only real booleans are known; null, a missing key, strings and
        numbers all become UNKNOWN.
        """
        if value is True:
            return cls.TRUE
        if value is False:
            return cls.FALSE
        return cls.UNKNOWN

    def to_json(self) -> Optional[bool]:
        if self is TriState.TRUE:
            return True
        if self is TriState.FALSE:
            return False
        return None

    @property
    def is_known(self) -> bool:
        return self is not TriState.UNKNOWN


def prefer(trusted: Any, inferred: TriState) -> TriState:
    """Reconcile a trusted JSON value with a text-derived one.

    Inference only fills an absent value (null or missing key). A present
    trusted value always wins; one that is not a boolean counts as UNKNOWN.
    """
    if trusted is None:
        return inferred
    return TriState.from_json(trusted)
