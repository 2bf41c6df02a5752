"""Edition domain object."""

import logging
from datetime import datetime

from .exceptions import InvalidCirculationError

logger = logging.getLogger(__name__)


class Edition:
    """A publishable item with a title, release date and circulation.

    Editions compare by value: two editions of the same class are equal when
    title, release date and circulation all match. All three fields are
    mutable, so an edition mutated while used as a dict key or set member
    will no longer be found under its old hash.

    Circulation is always assigned through the validating property, including
    during construction, so a negative circulation can never be stored.
    """

    def __init__(self, title: str, release_date: datetime, circulation: int = 0):
        self.title = title
        self.release_date = release_date
        self.circulation = circulation

    @property
    def circulation(self) -> int:
        return self._circulation

    @circulation.setter
    def circulation(self, value: int) -> None:
        if value < 0:
            logger.warning(f"Rejected negative circulation {value} for {self.title!r}")
            raise InvalidCirculationError(value)
        self._circulation = value

    def deep_copy(self) -> "Edition":
        """Return a new instance of this class with the same edition fields.

        The copy is built through the constructor, so circulation passes the
        same validation as any other assignment. Subclasses extend this to
        copy their own state.
        """
        return type(self)(self.title, self.release_date, self.circulation)

    def __eq__(self, other: object) -> bool:
        if other is None or type(self) is not type(other):
            return False
        return (
            self.title == other.title
            and self.release_date == other.release_date
            and self.circulation == other.circulation
        )

    def __hash__(self) -> int:
        return hash((self.title, self.release_date, self.circulation))

    def __str__(self) -> str:
        return (
            f"Edition: {self.title}, Release Date: {self.release_date}, "
            f"Circulation: {self.circulation}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(title={self.title!r}, "
            f"release_date={self.release_date!r}, circulation={self.circulation!r})"
        )
