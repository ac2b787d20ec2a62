from fastapi import APIRouter, Depends

from calcsuite.models.area import AreaRequest, AreaResult
from calcsuite.services.area import AreaService

router = APIRouter(prefix="/api", tags=["area"])


def get_area_service() -> AreaService:
    return AreaService()


@router.post("/area", response_model=AreaResult)
async def calculate_area(
    payload: AreaRequest,
    service: AreaService = Depends(get_area_service),
) -> AreaResult:
    return service.calculate(payload.shape, payload.dimensions())
