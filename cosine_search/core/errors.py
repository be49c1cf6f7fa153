class RetrievalError(Exception):
    """Base class for errors raised while answering a query."""


class IndexIntegrityError(RetrievalError):
    """A document reachable through postings cannot be scored."""

    def __init__(self, doc_id: int, reason: str):
        self.doc_id = doc_id
        self.reason = reason
        super().__init__(f"Index integrity violation for document {doc_id}: {reason}")


class IndexLoadError(RetrievalError):
    """The index snapshot could not be read or validated."""
