"""Article domain object."""

from dataclasses import dataclass

from .rating import RateAndCopy


@dataclass(eq=False)
class Article(RateAndCopy):
    """Represents a single rated article within a magazine.

    Articles compare by identity; two articles with the same title and
    rating are still distinct.

    Attributes:
        title: Article title, searched by the magazine's title queries
        rating: Reader rating, averaged into the magazine rating
    """

    title: str
    rating: float

    def deep_copy(self) -> "Article":
        return Article(title=self.title, rating=self.rating)
