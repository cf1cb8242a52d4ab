from fastapi import APIRouter
from trigrams.api.api_v1 import trigrams


api_router = APIRouter()

api_router.include_router(trigrams.router, prefix="", tags=["trigrams"])
