import logging

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile

from cosine_search.api.deps import get_index, get_model, get_processor
from cosine_search.core.config import DEFAULT_TOP_K
from cosine_search.core.errors import RetrievalError
from cosine_search.schemas.index import IndexSnapshot
from cosine_search.schemas.query import BatchSearchResponse, SearchResponse
from cosine_search.services.parser import parse_queries_file, parse_relevance_file, query_input
from cosine_search.services.retrieval import CosineModel
from cosine_search.services.search_engine import search_query, search_query_batch
from cosine_search.services.tokenizer import DocumentProcessor

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Search"])


@router.get("/search/", response_model=SearchResponse)
async def search(
    query: str,
    top_k: int = Query(DEFAULT_TOP_K, ge=1),
    index: IndexSnapshot = Depends(get_index),
    processor: DocumentProcessor = Depends(get_processor),
    model: CosineModel = Depends(get_model),
):
    if not query.strip():
        raise HTTPException(status_code=400, detail="Query cannot be empty")

    try:
        return search_query(index, processor, model, query, top_k)
    except RetrievalError as e:
        logger.error("Search failed for %r: %s", query, e)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/search-batch/", response_model=BatchSearchResponse)
async def search_batch(
    queries: UploadFile = File(...),
    relevance: UploadFile = File(...),
    index: IndexSnapshot = Depends(get_index),
    processor: DocumentProcessor = Depends(get_processor),
    model: CosineModel = Depends(get_model),
):
    """Batch search endpoint with MAP evaluation"""
    try:
        queries_content = (await queries.read()).decode("utf-8")
        relevance_content = (await relevance.read()).decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=400, detail=f"Input files must be UTF-8 text: {e}")

    if not queries_content.strip():
        raise HTTPException(status_code=400, detail="Queries file cannot be empty")

    try:
        parsed_queries = parse_queries_file(queries_content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Error parsing queries file: {e}")

    try:
        parsed_relevance = parse_relevance_file(relevance_content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Error parsing relevance file: {e}")

    inputs = query_input(parsed_queries, parsed_relevance)
    logger.debug("Created %d query input objects", len(inputs))

    try:
        return await search_query_batch(index, processor, model, inputs)
    except RetrievalError as e:
        logger.error("Batch search failed: %s", e)
        raise HTTPException(status_code=500, detail=f"Error during batch search: {e}")
