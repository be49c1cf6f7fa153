import pytest

from cosine_search.schemas.index import IndexSnapshot
from cosine_search.services.tokenizer import DocumentProcessor


class WhitespaceProcessor(DocumentProcessor):
    def process_text(self, text):
        return text.split()


def scenario_payload() -> dict:
    return {
        "vocabulary": {
            "cat": {"term_id": 1, "idf": 0.5},
            "dog": {"term_id": 2, "idf": 1.0},
        },
        "inverted_index": {
            "1": [{"doc_id": 10, "weight": 0.5}, {"doc_id": 20, "weight": 1.0}],
            "2": [{"doc_id": 10, "weight": 2.0}],
        },
        "documents": {
            "10": {"label": "A", "norm": 2.0},
            "20": {"label": "B", "norm": 1.0},
        },
    }


@pytest.fixture()
def scenario_data():
    return scenario_payload()


@pytest.fixture()
def scenario_index():
    return IndexSnapshot.model_validate(scenario_payload())


@pytest.fixture()
def tied_index():
    # three documents with identical weights and norms for "fish"
    return IndexSnapshot.model_validate({
        "vocabulary": {
            "fish": {"term_id": 7, "idf": 1.0},
            "empty": {"term_id": 8, "idf": 2.0},
        },
        "inverted_index": {
            "7": [
                {"doc_id": 30, "weight": 1.0},
                {"doc_id": 5, "weight": 1.0},
                {"doc_id": 12, "weight": 1.0},
            ],
        },
        "documents": {
            "5": {"label": "five", "norm": 1.0},
            "12": {"label": "twelve", "norm": 1.0},
            "30": {"label": "thirty", "norm": 1.0},
        },
    })


@pytest.fixture()
def processor():
    return WhitespaceProcessor()
