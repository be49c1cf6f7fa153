import pytest

from cosine_search.services.parser import parse_queries_file, parse_relevance_file, query_input

QUERIES = """
.I 1
.T
cat food
.A
Someone
.W
what do cats
eat
.I 2
.W
dog
.I 3
.T
"""


def test_parse_queries_file():
    queries = parse_queries_file(QUERIES)
    assert queries == {1: "cat food what do cats eat", 2: "dog"}


def test_parse_relevance_file():
    relevance = parse_relevance_file("1 10 0 0\n1 20 0 0\n\n2 10\n")
    assert relevance == {1: {10, 20}, 2: {10}}


def test_parse_relevance_file_rejects_garbage():
    with pytest.raises(ValueError):
        parse_relevance_file("one ten")


def test_query_input_attaches_relevance():
    inputs = query_input({1: "cat", 2: "dog"}, {1: {20}})
    assert [(q.query_id, q.relevant_docs) for q in inputs] == [(1, {20}), (2, set())]
