import pytest

from calcsuite.core.exceptions import InvalidInputError
from calcsuite.services.emi import EmiService, monthly_installment


@pytest.fixture()
def service() -> EmiService:
    return EmiService(preview_rows=5, full_schedule=False)


def test_reference_loan(service: EmiService) -> None:
    result = service.calculate(100000, 10, 12)

    assert result.emi == 8791.59
    assert result.total_payment == pytest.approx(105499.08, abs=0.005)
    assert result.total_interest == pytest.approx(5499.08, abs=0.005)


def test_zero_rate_is_straight_line(service: EmiService) -> None:
    result = service.calculate(120000, 0, 12)

    assert result.emi == 10000
    assert result.total_payment == 120000
    assert result.total_interest == 0
    assert monthly_installment(1000, 0, 3) == pytest.approx(1000 / 3)


def test_schedule_keeps_first_rows_and_final_month(service: EmiService) -> None:
    result = service.calculate(100000, 10, 12)

    assert [row.month for row in result.schedule] == [1, 2, 3, 4, 5, 12]
    assert result.schedule_truncated is True
    first = result.schedule[0]
    assert first.interest == 833.33
    assert first.principal + first.interest == pytest.approx(first.emi, abs=0.011)
    assert result.schedule[-1].balance == 0


def test_short_tenure_returns_every_row(service: EmiService) -> None:
    result = service.calculate(6000, 12, 6)

    assert [row.month for row in result.schedule] == [1, 2, 3, 4, 5, 6]
    assert result.schedule_truncated is False


def test_full_schedule_on_request(service: EmiService) -> None:
    result = service.calculate(100000, 10, 24, full_schedule=True)

    assert len(result.schedule) == 24
    assert result.schedule_truncated is False
    balances = [row.balance for row in result.schedule]
    assert balances == sorted(balances, reverse=True)
    assert min(balances) >= 0


@pytest.mark.parametrize(
    ("principal", "rate", "tenure"),
    [(0, 10, 12), (-5, 10, 12), (1000, -1, 12), (1000, 10, 0), (1000, 10, 1201)],
)
def test_out_of_domain_inputs_are_rejected(service: EmiService, principal: float, rate: float, tenure: int) -> None:
    with pytest.raises(InvalidInputError):
        service.calculate(principal, rate, tenure)


def test_absurd_rate_is_rejected(service: EmiService) -> None:
    with pytest.raises(InvalidInputError):
        service.calculate(1000, 1e9, 1200)
