import asyncio
import logging
import time

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from cosine_search.schemas.index import IndexSnapshot
from cosine_search.schemas.query import (
    BatchSearchResponse,
    QueryEvaluation,
    QueryInput,
    RankedResult,
    SearchResponse,
)
from cosine_search.services.calculation import (
    calculate_average_precision,
    calculate_mean_average_precision,
)
from cosine_search.services.ranker import compute_scores
from cosine_search.services.retrieval import CosineModel
from cosine_search.services.tokenizer import DocumentProcessor
from cosine_search.services.vectorizer import compute_vector

logger = logging.getLogger(__name__)


def search_query(
    index: IndexSnapshot,
    processor: DocumentProcessor,
    model: CosineModel,
    query: str,
    top_k: Optional[int] = None
) -> SearchResponse:
    start_time = time.time()

    terms = processor.process_text(query)
    query_vector = compute_vector(terms, index)
    scores = compute_scores(query_vector, index, model.policy)
    if top_k is not None:
        scores = scores[:top_k]

    elapsed_time = time.time() - start_time
    logger.debug("Search time for %r: %.4f s, %d results", query, elapsed_time, len(scores))

    return SearchResponse(
        query=query,
        query_vector=query_vector,
        results=[
            RankedResult(
                doc_id=r.doc_id,
                label=index.documents[r.doc_id].label,
                score=r.score,
                rank=i + 1
            )
            for i, r in enumerate(scores)
        ],
        elapsed_time=elapsed_time,
    )


async def search_query_batch(
    index: IndexSnapshot,
    processor: DocumentProcessor,
    model: CosineModel,
    queries: List[QueryInput]
) -> BatchSearchResponse:
    """
    Run every query against the same snapshot and evaluate the rankings.

    Queries are independent, so they run in a thread pool without locking.

    Args:
        index: Index snapshot shared by all queries
        processor: Document processor for the query texts
        model: Retrieval model to rank with
        queries: Parsed queries with their relevance judgements

    Returns:
        BatchSearchResponse with per-query AP and MAP
    """
    batch_start_time = time.time()

    loop = asyncio.get_running_loop()
    with ThreadPoolExecutor() as executor:
        tasks = [
            loop.run_in_executor(executor, model.run_query, q.query_text, index, processor)
            for q in queries
        ]
        rankings = await asyncio.gather(*tasks)

    all_results = {}
    all_relevant_docs = {}
    query_results = []

    for query, ranking in zip(queries, rankings):
        all_results[query.query_id] = ranking
        all_relevant_docs[query.query_id] = query.relevant_docs

        query_results.append(QueryEvaluation(
            query_id=f"q{query.query_id:03d}",
            query_text=query.query_text,
            average_precision=calculate_average_precision(ranking, query.relevant_docs),
            retrieved=len(ranking),
            relevant=len(query.relevant_docs),
        ))

    batch_elapsed_time = time.time() - batch_start_time
    logger.debug("Batch search time: %.4f s for %d queries", batch_elapsed_time, len(queries))

    return BatchSearchResponse(
        mean_average_precision=calculate_mean_average_precision(all_results, all_relevant_docs),
        processed_queries=len(query_results),
        query_results=query_results,
        elapsed_time=batch_elapsed_time,
    )
