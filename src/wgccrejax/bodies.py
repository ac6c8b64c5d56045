"""Identifiers for the bodies with a WGCCRE orientation model."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Body(Enum):
    """Solar-system body with an orientation model.

    Values are the canonical English names, matched case-sensitively by
    :func:`resolve_body`.
    """

    SOL = "Sol"
    MERCURY = "Mercury"
    VENUS = "Venus"
    EARTH = "Earth"
    MOON = "Moon"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"

    def as_str(self) -> str:
        """Return the canonical name of this body."""
        return self.value


class UnknownBodyError(ValueError):
    """Raised when a body identifier has no orientation model.

    Attributes:
        name: The identifier that failed to resolve.
    """

    def __init__(self, name: object) -> None:
        self.name = name
        supported = ", ".join(b.value for b in Body)
        super().__init__(
            f"No orientation model for body {name!r}. Supported bodies: {supported}"
        )


def resolve_body(body: Body | str) -> Body:
    """Resolve a body identifier to a :class:`Body`.

    Args:
        body: A :class:`Body` member, or its canonical name (exact,
            case-sensitive match, e.g. ``"Earth"``).

    Returns:
        The matching :class:`Body`.

    Raises:
        UnknownBodyError: If *body* names no supported body.

    Examples:
        ```python
        from wgccrejax.bodies import Body, resolve_body
        resolve_body("Mars") is Body.MARS  # True
        ```
    """
    if isinstance(body, Body):
        return body
    try:
        return Body(body)
    except ValueError:
        logger.error("Orientation requested for unsupported body %r", body)
        raise UnknownBodyError(body) from None
