import math

from typing import Dict, List, Set

from cosine_search.schemas.query import ScoredResult


def compute_tf_log(tf: int) -> float:
    return 1 + math.log(tf) if tf > 0 else 0


def calculate_average_precision(ranked_results: List[ScoredResult], relevant_docs: Set[int]) -> float:
    """Calculate Average Precision (AP)"""
    if not relevant_docs:
        return 0.0

    precisions = []
    relevant_count = 0

    for i, result in enumerate(ranked_results):
        if result.doc_id in relevant_docs:
            relevant_count += 1
            precisions.append(relevant_count / (i + 1))

    return sum(precisions) / len(relevant_docs) if precisions else 0.0


def calculate_mean_average_precision(
    all_results: Dict[int, List[ScoredResult]],
    relevant_docs: Dict[int, Set[int]]
) -> float:
    """Calculate Mean Average Precision (MAP), skipping queries without judgements"""
    average_precisions = []

    for query_id, results in all_results.items():
        if query_id in relevant_docs and len(relevant_docs[query_id]) > 0:
            average_precisions.append(calculate_average_precision(results, relevant_docs[query_id]))

    return sum(average_precisions) / len(average_precisions) if average_precisions else 0.0
