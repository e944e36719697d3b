"""Reports API."""

from typing import Any

from fastapi import APIRouter, Depends

from backoffice.api.deps import get_auth_context
from backoffice.auth.context import UserContext
from backoffice.services import reports

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/summary")
def get_summary(auth: UserContext = Depends(get_auth_context)) -> dict[str, Any]:
    """Revenue from completed bookings, bookings per room type and room status counts."""
    return reports.summary(auth)
