import json
import logging
import os

from typing import Dict

import aiofiles
from pydantic import ValidationError

from cosine_search.core.errors import IndexLoadError
from cosine_search.schemas.index import IndexSnapshot

logger = logging.getLogger(__name__)


def parse_index(data: Dict) -> IndexSnapshot:
    try:
        return IndexSnapshot.model_validate(data)
    except ValidationError as e:
        raise IndexLoadError(f"Invalid index snapshot: {e}") from e


async def load_index(file_path: str) -> IndexSnapshot:
    """
    Read an index snapshot stored as JSON.

    Args:
        file_path: Path to a JSON file with vocabulary, inverted_index and documents

    Returns:
        Validated IndexSnapshot
    """
    if not file_path or not os.path.exists(file_path):
        raise IndexLoadError(f"Index file not found: {file_path}")

    async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
        content = await f.read()

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise IndexLoadError(f"Index file {file_path} is not valid JSON: {e}") from e

    index = parse_index(data)
    logger.info(
        "Loaded index from %s: %d terms, %d documents",
        file_path, len(index.vocabulary), len(index.documents)
    )
    return index
