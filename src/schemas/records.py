"""Snapshot records for magazines.

Records are pydantic models describing a Magazine at a point in time,
including its derived rating and quality. They exist for presentation and
interchange (dicts and JSON text); they are not a storage format.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .article import Article
from .magazine import Frequency, Magazine
from .person import Person


class PersonRecord(BaseModel):
    """A person as it appears in a magazine snapshot."""

    name: str


class ArticleRecord(BaseModel):
    """An article as it appears in a magazine snapshot."""

    title: str
    rating: float


class MagazineRecord(BaseModel):
    """Snapshot of a Magazine.

    Attributes:
        title: Magazine title
        frequency: Publication frequency
        release_date: Release timestamp
        circulation: Copies in circulation (never negative)
        rating: Mean article rating at snapshot time
        quality: Rating per copy at snapshot time; infinite or NaN for a
            zero circulation, written to JSON as Infinity or NaN
        editors: Editors in insertion order
        articles: Articles in insertion order
    """

    title: str
    frequency: Frequency
    release_date: datetime
    circulation: int = Field(ge=0)
    rating: float = 0
    quality: float
    editors: list[PersonRecord] = []
    articles: list[ArticleRecord] = []

    model_config = ConfigDict(ser_json_inf_nan="constants")

    @classmethod
    def from_magazine(cls, magazine: Magazine) -> "MagazineRecord":
        return cls(
            title=magazine.title,
            frequency=magazine.frequency,
            release_date=magazine.release_date,
            circulation=magazine.circulation,
            rating=magazine.rating,
            quality=magazine.quality,
            editors=[PersonRecord(name=editor.name) for editor in magazine.editors],
            articles=[
                ArticleRecord(title=article.title, rating=article.rating)
                for article in magazine
            ],
        )

    def to_magazine(self) -> Magazine:
        """Build a new Magazine from this record.

        Rating and quality are derived again from the rebuilt articles; the
        recorded values are ignored.
        """
        magazine = Magazine(
            self.title, self.release_date, self.circulation, self.frequency
        )
        magazine.add_editors(*(Person(name=editor.name) for editor in self.editors))
        magazine.add_articles(
            *(Article(title=article.title, rating=article.rating) for article in self.articles)
        )
        return magazine
