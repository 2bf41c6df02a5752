"""Domain objects for the publication model."""

from .article import Article
from .edition import Edition
from .exceptions import InvalidCirculationError, ModelError
from .magazine import Frequency, Magazine
from .person import Person
from .rating import RateAndCopy

__all__ = [
    "Article",
    "Edition",
    "Frequency",
    "InvalidCirculationError",
    "Magazine",
    "ModelError",
    "Person",
    "RateAndCopy",
]
