"""Comment id grammar: validate ``<kind>:<identifier>`` reference ids."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass


class Kind(enum.Enum):
    """Kind of declaration a comment id points at."""

    NAMESPACE = "N"
    TYPE = "T"
    METHOD = "M"
    PROPERTY = "P"
    FIELD = "F"
    EVENT = "E"


# First character is a word character but not a digit.
_ID_SELECTOR = r"((?![0-9])[\w_])+[\w().{}\[\]|*^~#@!`,_<>:]*"
_COMMENT_ID_RE = re.compile(r"^(?P<kind>N|T|M|P|F|E):(?P<id>" + _ID_SELECTOR + r")$")


@dataclass(frozen=True)
class CommentId:
    """A validated comment id split into its kind and bare identifier."""

    kind: Kind
    identifier: str

    @property
    def raw(self) -> str:
        return f"{self.kind.value}:{self.identifier}"


def classify(candidate: object) -> CommentId | None:
    """Classify *candidate* as a comment id.

    Returns ``None`` for anything that is not exactly
    ``<N|T|M|P|F|E>:<identifier>``; never raises.
    """
    if not isinstance(candidate, str):
        return None
    match = _COMMENT_ID_RE.fullmatch(candidate)
    if match is None:
        return None
    return CommentId(Kind(match.group("kind")), match.group("id"))


def is_comment_id(candidate: object) -> bool:
    return classify(candidate) is not None
