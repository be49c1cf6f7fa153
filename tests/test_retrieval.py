import pytest

from cosine_search.core.errors import IndexIntegrityError
from cosine_search.schemas.index import IndexSnapshot
from cosine_search.services.retrieval import CosineModel, RetrievalModel, run_query
from cosine_search.services.tokenizer import NltkDocumentProcessor


def test_run_query_scenario(scenario_index, processor):
    results = run_query("cat", scenario_index, processor)
    assert [(r.doc_id, round(r.score, 6)) for r in results] == [(20, 1.0), (10, 0.25)]


def test_out_of_vocabulary_query_is_empty(scenario_index, processor):
    assert run_query("bird fish", scenario_index, processor) == []


def test_blank_query_is_empty(scenario_index, processor):
    assert run_query("", scenario_index, processor) == []


def test_cosine_model_is_a_retrieval_model():
    assert isinstance(CosineModel(), RetrievalModel)


def test_repeated_runs_are_identical(scenario_index, processor):
    model = CosineModel()
    first = model.run_query("dog cat cat", scenario_index, processor)
    second = model.run_query("dog cat cat", scenario_index, processor)
    assert first == second


def test_model_policy_is_applied(processor):
    index = IndexSnapshot.model_validate({
        "vocabulary": {"x": {"term_id": 1, "idf": 1.0}},
        "inverted_index": {"1": [{"doc_id": 1, "weight": 1.0}, {"doc_id": 2, "weight": 1.0}]},
        "documents": {"1": {"label": "ok", "norm": 1.0}},
    })
    with pytest.raises(IndexIntegrityError):
        CosineModel("raise").run_query("x", index, processor)
    assert [r.doc_id for r in CosineModel("drop").run_query("x", index, processor)] == [1]


def test_nltk_processor_keeps_order_and_duplicates():
    terms = NltkDocumentProcessor().process_text("Cat, dog! CAT and 42 dogs.")
    assert terms == ["cat", "dog", "cat", "and", "42", "dogs"]


def test_nltk_processor_with_index(scenario_index):
    results = run_query("The CAT?", scenario_index, NltkDocumentProcessor())
    assert [r.doc_id for r in results] == [20, 10]
