from __future__ import annotations

from enum import Enum

from relrun.core.result import Err, Ok, Result
from relrun.versioning.errors import InvalidClassification


class BumpClassification(Enum):
    """What kind of change triggered a release.

    ``BREAKING`` is a breaking change found in the commit history;
    ``MAJOR`` is an explicit request for a new major version.
    """

    PATCH = "patch"
    MINOR = "minor"
    BREAKING = "breaking"
    MAJOR = "major"

    def __str__(self) -> str:
        return self.value


def parse_classification(text: str) -> Result[BumpClassification, InvalidClassification]:
    key = text.strip().lower()
    for kind in BumpClassification:
        if kind.value == key:
            return Ok(kind)
    choices = ", ".join(k.value for k in BumpClassification)
    return Err(
        InvalidClassification(
            value=text,
            message=f"invalid bump classification: {text!r}",
            hint=f"expected one of: {choices}",
        )
    )
