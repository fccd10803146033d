# This project was developed with assistance from AI tools.
"""Health check route."""

from db import DatabaseService, get_db_service
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from .. import __version__
from ..schemas.health import HealthItem

router = APIRouter()


@router.get("", response_model=list[HealthItem])
async def health(db_service: DatabaseService = Depends(get_db_service)):
    """Report API and database status. 503 when any component is unhealthy."""
    db_ok, db_message = await db_service.health_check()
    items = [
        HealthItem(name="API", status="healthy", message="API is running", version=__version__),
        HealthItem(
            name="Database",
            status="healthy" if db_ok else "unhealthy",
            message=db_message,
        ),
    ]
    code = status.HTTP_200_OK if db_ok else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(status_code=code, content=[item.model_dump() for item in items])
