from fastapi import APIRouter, Depends

from calcsuite.models.conversions import ConversionRequest, ConversionResult, HeightResult, UnitCatalog
from calcsuite.services.conversions import ConversionService

router = APIRouter(prefix="/api", tags=["conversions"])


def get_conversion_service() -> ConversionService:
    return ConversionService()


@router.post("/length", response_model=ConversionResult)
async def convert_length(
    payload: ConversionRequest,
    service: ConversionService = Depends(get_conversion_service),
) -> ConversionResult:
    return service.length(payload.value, payload.unit)


@router.post("/weight", response_model=ConversionResult)
async def convert_weight(
    payload: ConversionRequest,
    service: ConversionService = Depends(get_conversion_service),
) -> ConversionResult:
    return service.weight(payload.value, payload.unit)


@router.post("/height", response_model=HeightResult)
async def convert_height(
    payload: ConversionRequest,
    service: ConversionService = Depends(get_conversion_service),
) -> HeightResult:
    return service.height(payload.value, payload.unit)


@router.post("/temperature", response_model=ConversionResult)
async def convert_temperature(
    payload: ConversionRequest,
    service: ConversionService = Depends(get_conversion_service),
) -> ConversionResult:
    return service.temperature(payload.value, payload.unit)


@router.get("/units", response_model=UnitCatalog)
async def list_units(service: ConversionService = Depends(get_conversion_service)) -> UnitCatalog:
    return service.catalog()
