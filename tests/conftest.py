"""Shared fixtures for the Lexis test suite."""

import pytest

from scanners import CalcScanner, QueryScanner, WordScanner


@pytest.fixture
def calc() -> CalcScanner:
    return CalcScanner()


@pytest.fixture
def words() -> WordScanner:
    return WordScanner()


@pytest.fixture
def query() -> QueryScanner:
    return QueryScanner()
