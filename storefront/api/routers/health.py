# storefront/api/routers/health.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.services.lock_service import LockService, get_lock_service
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(db: Session = Depends(get_db), locks: LockService = Depends(get_lock_service)):
    """
    Liveness + dostepnosc bazy i redisa. 503 gdy ktorys nie odpowiada.
    """
    checks = {}

    try:
        db.execute(text("SELECT 1"))
        checks["database"] = "healthy"
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        checks["database"] = "unhealthy"

    try:
        checks["redis"] = "healthy" if locks.ping() else "unhealthy"
    except Exception as e:
        logger.warning(f"Redis health check failed: {e}")
        checks["redis"] = "unhealthy"

    healthy = all(v == "healthy" for v in checks.values())
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={"status": "healthy" if healthy else "unhealthy", "checks": checks},
    )
