from fastapi import APIRouter
from fastapi.responses import JSONResponse

from teacherson.database import connection


router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    database_ok = await connection.ping()
    body = {"status": "ok" if database_ok else "degraded", "database": database_ok}
    return JSONResponse(status_code=200 if database_ok else 503, content=body)
