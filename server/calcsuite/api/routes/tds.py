from typing import List

from fastapi import APIRouter, Depends

from calcsuite.models.finance import TdsCategory, TdsRequest, TdsResult
from calcsuite.services.tds import TdsService

router = APIRouter(prefix="/api/tds", tags=["finance"])


def get_tds_service() -> TdsService:
    return TdsService()


@router.post("", response_model=TdsResult)
async def calculate_tds(
    payload: TdsRequest,
    service: TdsService = Depends(get_tds_service),
) -> TdsResult:
    return service.calculate(payload.amount, payload.category)


@router.get("/categories", response_model=List[TdsCategory])
async def list_tds_categories(service: TdsService = Depends(get_tds_service)) -> List[TdsCategory]:
    return service.categories()
