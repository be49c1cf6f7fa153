from fastapi import Request

from cosine_search.schemas.index import IndexSnapshot
from cosine_search.services.retrieval import CosineModel
from cosine_search.services.tokenizer import DocumentProcessor


def get_index(request: Request) -> IndexSnapshot:
    return request.app.state.index


def get_processor(request: Request) -> DocumentProcessor:
    return request.app.state.processor


def get_model(request: Request) -> CosineModel:
    return request.app.state.model
