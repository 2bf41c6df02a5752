"""Magazine domain object.

A Magazine is a periodical Edition that owns a list of editors and a list of
articles. Its rating and quality are derived on every access; nothing is
cached. Filter queries are generators over the live lists, so they reflect
the magazine's state at the time they are consumed.

Editors are matched to articles by substring: an editor "has" an article
when the editor's name appears anywhere in the article title. There is no
authorship link in the model beyond that.
"""

import logging
import math
from collections.abc import Iterator
from datetime import datetime
from enum import Enum

from .article import Article
from .edition import Edition
from .person import Person
from .rating import RateAndCopy

logger = logging.getLogger(__name__)


class Frequency(Enum):
    """Publication frequency of a periodical."""

    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"

    def __str__(self) -> str:
        return self.value


class Magazine(Edition, RateAndCopy):
    """A periodical edition aggregating articles and editors.

    Equality is inherited from Edition unchanged: two magazines with the same
    title, release date and circulation are equal regardless of frequency,
    editors or articles.

    Not thread-safe. Callers sharing a magazine across threads must serialize
    add_articles, add_editors and circulation updates against readers.
    """

    def __init__(
        self,
        title: str,
        release_date: datetime,
        circulation: int = 0,
        frequency: Frequency = Frequency.WEEKLY,
    ):
        super().__init__(title, release_date, circulation)
        self.frequency = frequency
        self._editors: list[Person] = []
        self._articles: list[Article] = []

    @property
    def editors(self) -> tuple[Person, ...]:
        """Editors in insertion order; use add_editors to append."""
        return tuple(self._editors)

    @property
    def articles(self) -> tuple[Article, ...]:
        """Articles in insertion order; use add_articles to append."""
        return tuple(self._articles)

    @property
    def rating(self) -> float:
        """Mean article rating, or 0 when the magazine has no articles."""
        if not self._articles:
            return 0
        return sum(article.rating for article in self._articles) / len(self._articles)

    @property
    def quality(self) -> float:
        """Rating per copy in circulation.

        A zero circulation follows IEEE-754 division: infinity signed like the
        rating, or NaN when the rating is also zero.
        """
        rating = self.rating
        if self.circulation == 0:
            if rating == 0 or math.isnan(rating):
                return math.nan
            return math.copysign(math.inf, rating)
        return rating / self.circulation

    def add_articles(self, *articles: Article) -> None:
        self._articles.extend(articles)
        logger.debug(f"Added {len(articles)} article(s) to {self.title!r}")

    def add_editors(self, *editors: Person) -> None:
        self._editors.extend(editors)
        logger.debug(f"Added {len(editors)} editor(s) to {self.title!r}")

    def deep_copy(self) -> "Magazine":
        """Return a magazine sharing no mutable state with this one.

        Edition fields are copied by the base implementation, which goes
        through the validating circulation setter; every editor and article is
        then cloned in order.
        """
        copy = super().deep_copy()
        copy.frequency = self.frequency
        copy._editors = [editor.deep_copy() for editor in self._editors]
        copy._articles = [article.deep_copy() for article in self._articles]
        logger.debug(
            f"Deep-copied {self.title!r} with {len(copy._editors)} editor(s) "
            f"and {len(copy._articles)} article(s)"
        )
        return copy

    def __iter__(self) -> Iterator[Article]:
        return iter(self._articles)

    def articles_with_rating_greater_than(self, rating: float) -> Iterator[Article]:
        return (article for article in self._articles if article.rating > rating)

    def articles_with_title_containing(self, keyword: str) -> Iterator[Article]:
        return (article for article in self._articles if keyword in article.title)

    def articles_by_editors(self) -> Iterator[Article]:
        """Articles whose title contains the name of any editor."""
        return (
            article
            for article in self._articles
            if any(editor.name in article.title for editor in self._editors)
        )

    def editors_with_articles(self) -> Iterator[Person]:
        """Editors whose name appears in at least one article title."""
        return (editor for editor in self._editors if self._has_articles(editor))

    def editors_without_articles(self) -> Iterator[Person]:
        """Editors whose name appears in no article title."""
        return (editor for editor in self._editors if not self._has_articles(editor))

    def _has_articles(self, editor: Person) -> bool:
        return any(editor.name in article.title for article in self._articles)

    def to_short_string(self) -> str:
        return (
            f"Magazine: {self.title}, Frequency: {self.frequency}, "
            f"Average Rating: {self.rating}"
        )

    def __str__(self) -> str:
        return (
            f"Magazine: {self.title}, Frequency: {self.frequency}, "
            f"Release Date: {self.release_date}, Circulation: {self.circulation}"
        )
