from typing import Dict, List, Set
from pydantic import BaseModel, ConfigDict


class ScoredResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_id: int
    score: float


class RankedResult(BaseModel):
    doc_id: int
    label: str
    score: float
    rank: int


class SearchResponse(BaseModel):
    query: str
    query_vector: Dict[int, float]
    results: List[RankedResult]
    elapsed_time: float


class QueryInput(BaseModel):
    query_id: int
    query_text: str
    relevant_docs: Set[int] = set()


class QueryEvaluation(BaseModel):
    query_id: str
    query_text: str
    average_precision: float
    retrieved: int
    relevant: int


class BatchSearchResponse(BaseModel):
    mean_average_precision: float
    processed_queries: int
    query_results: List[QueryEvaluation]
    elapsed_time: float
