from abc import ABC, abstractmethod
from typing import List

from cosine_search.core.config import INTEGRITY_POLICY
from cosine_search.schemas.index import IndexSnapshot
from cosine_search.schemas.query import ScoredResult
from cosine_search.services.ranker import compute_scores
from cosine_search.services.tokenizer import DocumentProcessor
from cosine_search.services.vectorizer import compute_vector


class RetrievalModel(ABC):
    """A scoring strategy over a shared index snapshot."""

    @abstractmethod
    def run_query(
        self,
        query_text: str,
        index: IndexSnapshot,
        processor: DocumentProcessor
    ) -> List[ScoredResult]:
        raise NotImplementedError()


class CosineModel(RetrievalModel):
    """Vector space retrieval with TF-IDF weights and cosine similarity."""

    def __init__(self, policy: str = INTEGRITY_POLICY):
        self.policy = policy

    def run_query(self, query_text, index, processor):
        terms = processor.process_text(query_text)
        query_vector = compute_vector(terms, index)
        return compute_scores(query_vector, index, self.policy)


def run_query(
    query_text: str,
    index: IndexSnapshot,
    processor: DocumentProcessor,
    policy: str = INTEGRITY_POLICY
) -> List[ScoredResult]:
    return CosineModel(policy).run_query(query_text, index, processor)
