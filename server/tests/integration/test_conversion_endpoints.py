from fastapi.testclient import TestClient

from calcsuite.main import create_app


def create_test_client() -> TestClient:
    return TestClient(create_app())


def test_length_endpoint() -> None:
    client = create_test_client()

    response = client.post("/api/length", json={"value": 1, "unit": "mile"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["unit"] == "mi"
    assert payload["conversions"]["km"] == 1.609344


def test_weight_endpoint() -> None:
    client = create_test_client()

    response = client.post("/api/weight", json={"value": 1000, "unit": "g"})

    assert response.status_code == 200
    assert response.json()["conversions"]["kg"] == 1.0


def test_height_endpoint_includes_feet_inches_label() -> None:
    client = create_test_client()

    response = client.post("/api/height", json={"value": 5.75, "unit": "ft"})

    assert response.status_code == 200
    assert response.json()["feetInches"] == "5' 9\""


def test_temperature_endpoint() -> None:
    client = create_test_client()

    response = client.post("/api/temperature", json={"value": 100, "unit": "C"})

    assert response.status_code == 200
    assert response.json()["conversions"] == {"c": 100.0, "f": 212.0, "k": 373.15}


def test_unknown_unit_returns_structured_error() -> None:
    client = create_test_client()

    response = client.post("/api/length", json={"value": 3, "unit": "parsec"})

    assert response.status_code == 400
    payload = response.json()
    assert payload["type"] == "INVALID_UNIT"
    assert payload["received"] == {"value": 3.0, "unit": "parsec"}


def test_non_finite_value_is_rejected() -> None:
    client = create_test_client()

    response = client.post("/api/weight", json={"value": "NaN", "unit": "kg"})

    assert response.status_code == 400
    assert response.json()["type"] == "INVALID_INPUT"


def test_units_catalog() -> None:
    client = create_test_client()

    response = client.get("/api/units")

    assert response.status_code == 200
    assert response.json()["temperature"] == ["c", "f", "k"]


def test_temperature_overflow_returns_400() -> None:
    client = create_test_client()

    response = client.post("/api/temperature", json={"value": 1e308, "unit": "f"})

    assert response.status_code == 400
    assert response.json()["type"] == "INVALID_INPUT"
