from fastapi import APIRouter, Depends

from calcsuite.models.finance import PercentageRequest, PercentageResult
from calcsuite.services.percentage import PercentageService

router = APIRouter(prefix="/api", tags=["finance"])


def get_percentage_service() -> PercentageService:
    return PercentageService()


@router.post("/percentage", response_model=PercentageResult)
async def calculate_percentage(
    payload: PercentageRequest,
    service: PercentageService = Depends(get_percentage_service),
) -> PercentageResult:
    return service.calculate(payload.type, payload.a, payload.b)
