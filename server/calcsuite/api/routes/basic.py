from fastapi import APIRouter, Depends

from calcsuite.core.exceptions import InvalidInputError
from calcsuite.models.arithmetic import ArithmeticResult, BasicCalculationRequest
from calcsuite.services.arithmetic import ArithmeticService

router = APIRouter(prefix="/api", tags=["arithmetic"])


def get_arithmetic_service() -> ArithmeticService:
    return ArithmeticService()


@router.post("/basic", response_model=ArithmeticResult, response_model_exclude_none=True)
async def calculate_basic(
    payload: BasicCalculationRequest,
    service: ArithmeticService = Depends(get_arithmetic_service),
) -> ArithmeticResult:
    if payload.expression is not None:
        return service.evaluate(payload.expression)
    if payload.a is None or payload.b is None or payload.operator is None:
        raise InvalidInputError(
            "Provide either an expression or the fields a, b and operator.",
            received=payload.model_dump(by_alias=True, exclude_none=True),
        )
    return service.apply(payload.a, payload.b, payload.operator)
