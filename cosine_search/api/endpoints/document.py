from fastapi import APIRouter, Depends, HTTPException

from cosine_search.api.deps import get_index
from cosine_search.schemas.index import DocumentEntry, IndexSnapshot

router = APIRouter(tags=["Document"])


@router.get("/docs/{doc_id}", response_model=DocumentEntry)
async def fetch_document_by_id(
    doc_id: int,
    index: IndexSnapshot = Depends(get_index)
):
    doc = index.document(doc_id)
    if not doc:
        raise HTTPException(status_code=404, detail=f"Document with ID {doc_id} not found")
    return doc
