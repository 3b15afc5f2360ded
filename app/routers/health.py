from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.errors import StorageError
from app.db.dal import Database
from .deps import get_db

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness plus database connectivity")
def health(db: Database = Depends(get_db)):
    try:
        db.ping()
    except StorageError as e:
        return JSONResponse(
            status_code=503, content={"status": "error", "message": str(e)}
        )
    return {"status": "ok", "db": "connected"}
