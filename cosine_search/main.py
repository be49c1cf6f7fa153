from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cosine_search.core.config import INDEX_PATH, INTEGRITY_POLICY
from cosine_search.core.logger import configure_logging
from cosine_search.schemas.index import IndexSnapshot
from cosine_search.services.index_loader import load_index
from cosine_search.services.retrieval import CosineModel
from cosine_search.services.tokenizer import DocumentProcessor, NltkDocumentProcessor

from cosine_search.api.endpoints import document, search


def create_app(
    index: Optional[IndexSnapshot] = None,
    processor: Optional[DocumentProcessor] = None,
    policy: Optional[str] = None,
    index_path: Optional[str] = None,
) -> FastAPI:
    """
    Build the search service.

    When no index is passed, it is loaded from index_path (or INDEX_PATH)
    on startup and kept read-only for the lifetime of the app.
    """
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if index is None:
            app.state.index = await load_index(index_path or INDEX_PATH)
        else:
            app.state.index = index
        app.state.processor = processor or NltkDocumentProcessor()
        app.state.model = CosineModel(policy or INTEGRITY_POLICY)
        yield

    app = FastAPI(lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(document.router)
    app.include_router(search.router)

    return app


app = create_app()
