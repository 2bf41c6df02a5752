"""Pytest fixtures for magazine-catalog tests."""

from datetime import datetime

import pytest

from schemas import Article, Frequency, Magazine, Person


@pytest.fixture
def release_date():
    """Fixed release timestamp so equality checks are deterministic."""
    return datetime(2026, 1, 15, 9, 30, 0)


@pytest.fixture
def editors():
    """Two editors whose names appear in no sample article title."""
    return [Person("Editor 1"), Person("Editor 2")]


@pytest.fixture
def articles():
    """Two sample articles on either side of a 4.0 rating."""
    return [Article("Article 1", 4.5), Article("Article 2", 3.8)]


@pytest.fixture
def magazine(release_date, editors, articles):
    """Monthly magazine populated with the sample editors and articles."""
    magazine = Magazine("Magazine 1", release_date, 5000, Frequency.MONTHLY)
    magazine.add_editors(*editors)
    magazine.add_articles(*articles)
    return magazine
