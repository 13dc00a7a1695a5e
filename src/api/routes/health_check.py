from fastapi import APIRouter

from src.api.response import success

router = APIRouter()


@router.get("/health")
async def health_check():
    return success(message="OK")
