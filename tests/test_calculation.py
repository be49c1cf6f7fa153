import pytest

from cosine_search.schemas.query import ScoredResult
from cosine_search.services.calculation import (
    calculate_average_precision,
    calculate_mean_average_precision,
)


def _ranking(*doc_ids):
    return [ScoredResult(doc_id=d, score=1.0 / (i + 1)) for i, d in enumerate(doc_ids)]


def test_average_precision():
    # relevant at ranks 1 and 3
    ap = calculate_average_precision(_ranking(1, 2, 3, 4), {1, 3})
    assert ap == pytest.approx((1.0 + 2 / 3) / 2)


def test_average_precision_counts_unretrieved_relevant():
    assert calculate_average_precision(_ranking(1), {1, 9}) == pytest.approx(0.5)


def test_average_precision_without_judgements():
    assert calculate_average_precision(_ranking(1, 2), set()) == 0.0


def test_mean_average_precision_skips_unjudged_queries():
    results = {1: _ranking(1, 2), 2: _ranking(3), 3: _ranking(4)}
    relevant = {1: {2}, 2: {3}, 3: set()}
    assert calculate_mean_average_precision(results, relevant) == pytest.approx((0.5 + 1.0) / 2)


def test_mean_average_precision_empty():
    assert calculate_mean_average_precision({}, {}) == 0.0
