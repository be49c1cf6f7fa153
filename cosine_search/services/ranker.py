import logging
import math

from collections import defaultdict
from typing import List

from cosine_search.core.errors import IndexIntegrityError, RetrievalError
from cosine_search.schemas.index import IndexSnapshot
from cosine_search.schemas.query import ScoredResult
from cosine_search.services.vectorizer import SparseVector

logger = logging.getLogger(__name__)

RAISE = "raise"
DROP = "drop"


def _doc_norm(index: IndexSnapshot, doc_id: int) -> float:
    doc = index.document(doc_id)
    if doc is None:
        raise IndexIntegrityError(doc_id, "document missing from document table")
    if not math.isfinite(doc.norm) or doc.norm <= 0:
        raise IndexIntegrityError(doc_id, f"invalid norm {doc.norm}")
    return doc.norm


def compute_scores(
    query_vector: SparseVector,
    index: IndexSnapshot,
    policy: str = RAISE
) -> List[ScoredResult]:
    """
    Rank documents by cosine similarity with the query vector.

    Only documents sharing at least one term with the query are scored.
    Results are sorted by score descending, ties by ascending doc id.

    Args:
        query_vector: Term id to query weight
        index: Index snapshot to read postings and document norms from
        policy: "raise" fails the query on a broken document entry,
            "drop" logs it and leaves the document out

    Returns:
        List of ScoredResult
    """
    if policy not in (RAISE, DROP):
        raise ValueError(f"Unknown integrity policy: {policy}")

    sims = defaultdict(float)

    for term_id, weight_query in query_vector.items():
        for posting in index.postings(term_id):
            sims[posting.doc_id] += weight_query * posting.weight

    # hypot does not underflow for tiny weights
    query_norm = math.hypot(*query_vector.values())
    if not math.isfinite(query_norm):
        raise RetrievalError(f"Query vector has non-finite norm {query_norm}")

    results = []
    for doc_id, dot_product in sims.items():
        try:
            doc_norm = _doc_norm(index, doc_id)
            # all matched query weights are zero, the angle is undefined
            score = dot_product / query_norm / doc_norm if query_norm > 0 else 0.0
            if not math.isfinite(score):
                raise IndexIntegrityError(doc_id, f"non-finite score {score}")
        except IndexIntegrityError as e:
            if policy == RAISE:
                raise
            logger.warning("Dropping document from ranking: %s", e)
            continue

        results.append(ScoredResult(doc_id=doc_id, score=score))

    results.sort(key=lambda r: (-r.score, r.doc_id))
    return results
