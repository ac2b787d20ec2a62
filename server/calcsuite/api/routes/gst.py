from fastapi import APIRouter, Depends

from calcsuite.models.finance import GstRequest, GstResult
from calcsuite.services.gst import GstService

router = APIRouter(prefix="/api", tags=["finance"])


def get_gst_service() -> GstService:
    return GstService()


@router.post("/gst", response_model=GstResult)
async def calculate_gst(
    payload: GstRequest,
    service: GstService = Depends(get_gst_service),
) -> GstResult:
    return service.calculate(payload.amount, payload.rate, payload.type)
