"""Rate-and-copy capability shared by rated content."""

from abc import ABC, abstractmethod


class RateAndCopy(ABC):
    """Abstract base class for objects with a rating that can clone themselves.

    Implementations expose ``rating`` either as a plain attribute (Article)
    or as a derived property (Magazine).
    """

    rating: float

    @abstractmethod
    def deep_copy(self) -> "RateAndCopy":
        """Return an independent copy sharing no mutable state with this one."""
        pass
