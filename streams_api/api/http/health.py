from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from streams_api.api.deps import get_db
from streams_api.core.db import Database

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(db: Database = Depends(get_db)):
    """Проверка доступности сервиса и БД"""
    if await db.is_alive():
        return {"status": "ok"}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unavailable"}
    )
