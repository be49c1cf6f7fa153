from abc import ABC, abstractmethod
from typing import List

from nltk.tokenize import word_tokenize


class DocumentProcessor(ABC):
    """Turns raw text into an ordered list of index terms."""

    @abstractmethod
    def process_text(self, text: str) -> List[str]:
        raise NotImplementedError()


class NltkDocumentProcessor(DocumentProcessor):
    """
    Lowercase, tokenize and keep alphanumeric tokens.

    Order and duplicates are preserved since repetition drives query term
    frequency. preserve_line skips sentence splitting, so the punkt model is
    not required.
    """

    def process_text(self, text: str) -> List[str]:
        tokens = word_tokenize(text.lower(), preserve_line=True)
        return [t for t in tokens if t.isalnum()]
