from typing import Dict, Optional, Tuple
from pydantic import BaseModel, ConfigDict


class VocabularyEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    term_id: int
    idf: float


class Posting(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_id: int
    weight: float


class DocumentEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    norm: float


class IndexSnapshot(BaseModel):
    """
    Read-only view of an index built elsewhere.

    vocabulary maps a term to its id and precomputed idf, inverted_index maps a
    term id to its postings and documents maps a doc id to its label and the
    Euclidean norm of its weight vector.
    """

    model_config = ConfigDict(frozen=True)

    vocabulary: Dict[str, VocabularyEntry] = {}
    inverted_index: Dict[int, Tuple[Posting, ...]] = {}
    documents: Dict[int, DocumentEntry] = {}

    def lookup(self, term: str) -> Optional[VocabularyEntry]:
        return self.vocabulary.get(term)

    def postings(self, term_id: int) -> Tuple[Posting, ...]:
        return self.inverted_index.get(term_id, ())

    def document(self, doc_id: int) -> Optional[DocumentEntry]:
        return self.documents.get(doc_id)
