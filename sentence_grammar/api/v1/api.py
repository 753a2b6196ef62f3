from fastapi import APIRouter

from sentence_grammar.api.v1.endpoints import grammar

api_router = APIRouter()
api_router.include_router(
    grammar.router,
    prefix='/grammar',
    tags=['grammar'],
)
