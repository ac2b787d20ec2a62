from fastapi import APIRouter, Depends

from calcsuite.models.age import AgeRequest, AgeResult
from calcsuite.services.age import AgeService

router = APIRouter(prefix="/api", tags=["age"])


def get_age_service() -> AgeService:
    return AgeService()


@router.post("/age", response_model=AgeResult)
async def calculate_age(
    payload: AgeRequest,
    service: AgeService = Depends(get_age_service),
) -> AgeResult:
    return service.calculate(payload.birth_date, payload.as_of)
