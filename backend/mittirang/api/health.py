from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health", tags=["health"])
def health(request: Request):
    db_ok = request.app.state.database.ping()
    storage_ok = False
    try:
        storage_ok = request.app.state.storage.health_check()
    except OSError:
        storage_ok = False

    return {
        "status": "ok" if db_ok and storage_ok else "degraded",
        "db": db_ok,
        "media_storage": storage_ok,
    }
