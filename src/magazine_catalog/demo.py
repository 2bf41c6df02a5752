"""Demonstration scenario for the publication model.

The Demo drives the model purely through its public API: it builds two
equal editions, attempts an invalid circulation, populates a magazine,
deep-copies it, mutates the original and runs every filter query.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from schemas import Article, Edition, Frequency, InvalidCirculationError, Magazine, Person

logger = logging.getLogger(__name__)


@dataclass
class DemoReport:
    """Results collected while running the demonstration.

    Attributes:
        edition: First of the two value-equal editions
        twin: Second edition, equal to ``edition`` but a distinct object
        rejected_circulation: Message of the rejected circulation assignment
        magazine_data: Full rendering of the magazine before it was copied
        magazine: Original magazine, mutated after being copied
        copy: Deep copy taken before the mutation
        quality: Quality of the magazine before the mutation
        rated_articles: Articles above the rating threshold
        matching_articles: Articles whose title contains the keyword
        articles_by_editors: Articles whose title names an editor
        editors_with_articles: Editors named in some article title
        editors_without_articles: Editors named in no article title
    """

    edition: Edition
    twin: Edition
    rejected_circulation: str | None
    magazine_data: str
    magazine: Magazine
    copy: Magazine
    quality: float
    rated_articles: list[Article] = field(default_factory=list)
    matching_articles: list[Article] = field(default_factory=list)
    articles_by_editors: list[Article] = field(default_factory=list)
    editors_with_articles: list[Person] = field(default_factory=list)
    editors_without_articles: list[Person] = field(default_factory=list)


class Demo:
    """Runs the demonstration scenario from a dict config.

    Config keys:
        release_date: Release timestamp for every edition (default: now)
        circulation: Initial magazine circulation (default: 5000)
        rating_threshold: Exclusive lower bound for rated articles (default: 4.0)
        title_keyword: Substring searched in article titles (default: "Article")
        invalid_circulation: Value used to exercise validation (default: -100)
    """

    def __init__(self, config: dict | None = None):
        self._config = config or {}

    @property
    def release_date(self) -> datetime:
        return self._config.get("release_date") or datetime.now()

    @property
    def circulation(self) -> int:
        return int(self._config.get("circulation", 5000))

    @property
    def rating_threshold(self) -> float:
        return float(self._config.get("rating_threshold", 4.0))

    @property
    def title_keyword(self) -> str:
        return str(self._config.get("title_keyword", "Article"))

    @property
    def invalid_circulation(self) -> int:
        return int(self._config.get("invalid_circulation", -100))

    def run(self) -> DemoReport:
        """Execute the scenario and collect its results.

        Raises:
            InvalidCirculationError: If the configured magazine circulation
                is negative
        """
        release_date = self.release_date

        edition = Edition("Edition 1", release_date, 1000)
        twin = Edition("Edition 1", release_date, 1000)
        logger.info(f"Editions equal: {edition == twin}, same object: {edition is twin}")

        rejected = None
        try:
            edition.circulation = self.invalid_circulation
        except InvalidCirculationError as e:
            rejected = e.message
            logger.info(f"Invalid circulation rejected: {e.message}")

        magazine = Magazine("Magazine 1", release_date, self.circulation, Frequency.MONTHLY)
        magazine.add_editors(Person("Editor 1"), Person("Editor 2"))
        magazine.add_articles(Article("Article 1", 4.5), Article("Article 2", 3.8))
        quality = magazine.quality
        magazine_data = str(magazine)
        logger.info(f"Built {magazine.to_short_string()}")

        copy = magazine.deep_copy()
        magazine.title = "Modified Magazine"
        magazine.release_date = release_date + timedelta(days=30)
        magazine.circulation = self.circulation + 2000

        return DemoReport(
            edition=edition,
            twin=twin,
            rejected_circulation=rejected,
            magazine_data=magazine_data,
            magazine=magazine,
            copy=copy,
            quality=quality,
            rated_articles=list(magazine.articles_with_rating_greater_than(self.rating_threshold)),
            matching_articles=list(magazine.articles_with_title_containing(self.title_keyword)),
            articles_by_editors=list(magazine.articles_by_editors()),
            editors_with_articles=list(magazine.editors_with_articles()),
            editors_without_articles=list(magazine.editors_without_articles()),
        )
