from fastapi import APIRouter, Depends

from calcsuite.models.finance import EmiRequest, EmiResult
from calcsuite.services.emi import EmiService

router = APIRouter(prefix="/api", tags=["finance"])


def get_emi_service() -> EmiService:
    return EmiService()


@router.post("/emi", response_model=EmiResult)
async def calculate_emi(
    payload: EmiRequest,
    service: EmiService = Depends(get_emi_service),
) -> EmiResult:
    return service.calculate(
        payload.principal,
        payload.rate,
        payload.tenure,
        full_schedule=payload.full_schedule,
    )
