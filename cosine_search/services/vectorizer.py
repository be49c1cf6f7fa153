from collections import Counter
from typing import Dict, Sequence

from cosine_search.schemas.index import IndexSnapshot
from cosine_search.services.calculation import compute_tf_log

SparseVector = Dict[int, float]


def compute_vector(terms: Sequence[str], index: IndexSnapshot) -> SparseVector:
    """
    Build the weighted query vector for a list of query terms.

    Each distinct term in the vocabulary gets weight (1 + ln(freq)) * idf,
    where freq counts its occurrences in the query. Terms missing from the
    vocabulary cannot match any document and are left out.

    Args:
        terms: Processed query terms, duplicates included
        index: Index snapshot providing the vocabulary

    Returns:
        Dictionary mapping term ids to query weights
    """
    vector = {}

    for term, freq in Counter(terms).items():
        entry = index.lookup(term)
        if entry is None:
            continue
        vector[entry.term_id] = compute_tf_log(freq) * entry.idf

    return vector
