import pytest
from fastapi.testclient import TestClient

from rentadvisor.api.main import app, get_model_client
from rentadvisor.model_client import RentModelClient

PAYLOAD = {
    "propertySubject": "AL",
    "unitType": "Studio",
    "unitStatus": "Vacant",
    "occupiedUnits": 0,
    "vacantUnits": 5,
    "clientBaseRent": 1000,
    "clientRentOfCare": 50,
    "marketBaseRent": 1100,
    "marketRentOfCare": 60,
    "desiredOccupancy": 95,
}

MODEL_OUTPUT = ("Studio in AL", "$1,050", "$55", "Raise rent slightly")


class FakeModel:
    def __init__(self, output=MODEL_OUTPUT, error=None):
        self.output = output
        self.error = error
        self.calls = []

    def predict(self, params):
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def use_model(model):
    app.dependency_overrides[get_model_client] = lambda: model
    return model


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_predict_relays_model_output(client):
    model = use_model(FakeModel())

    response = client.post("/api/predict", json=PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"data": list(MODEL_OUTPUT)}
    assert len(model.calls) == 1
    assert model.calls[0] == {
        "subject_prefix": "AL",
        "unit_category": "Studio",
        "unit_status": "Vacant",
        "occupied_units": 0,
        "vacant_units": 5,
        "client_base_rent": 1000,
        "client_rent_of_care": 50,
        "market_base_rent": 1100,
        "market_rent_of_care": 60,
        "desired_occupancy_rate": 95,
    }


def test_json_ints_reach_the_model_as_ints(client):
    model = use_model(FakeModel())

    client.post("/api/predict", json=PAYLOAD)

    params = model.calls[0]
    assert type(params["vacant_units"]) is int
    assert type(params["desired_occupancy_rate"]) is int


def test_json_floats_pass_through(client):
    model = use_model(FakeModel())

    client.post("/api/predict", json={**PAYLOAD, "clientRentOfCare": 50.25})

    assert model.calls[0]["client_rent_of_care"] == 50.25


def test_numeric_string_is_rejected(client):
    model = use_model(FakeModel())

    response = client.post("/api/predict", json={**PAYLOAD, "vacantUnits": "5"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch prediction"}
    assert model.calls == []


def test_non_string_model_values_are_relayed(client):
    use_model(FakeModel(output=("Studio in AL", 1050.0, 55, "Raise rent")))

    response = client.post("/api/predict", json=PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"data": ["Studio in AL", 1050.0, 55, "Raise rent"]}


def test_predict_alias_route(client):
    use_model(FakeModel())
    response = client.post("/predict", json=PAYLOAD)
    assert response.status_code == 200
    assert response.json()["data"] == list(MODEL_OUTPUT)


def test_model_exception_is_not_leaked(client):
    use_model(FakeModel(error=RuntimeError("401 invalid token hf_secret")))

    response = client.post("/api/predict", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch prediction"}
    assert "hf_secret" not in response.text


@pytest.mark.parametrize(
    "output",
    [
        ("only", "three", "items"),
        ("a", "b", "c", "d", "e"),
        "not a tuple",
        None,
    ],
)
def test_malformed_model_output(client, output):
    use_model(FakeModel(output=output))

    response = client.post("/api/predict", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch prediction"}


def test_missing_field_fails_without_calling_model(client):
    model = use_model(FakeModel())
    body = {k: v for k, v in PAYLOAD.items() if k != "marketBaseRent"}

    response = client.post("/api/predict", json=body)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch prediction"}
    assert model.calls == []


def test_non_object_body(client):
    model = use_model(FakeModel())

    response = client.post("/api/predict", content=b"not json", headers={"content-type": "application/json"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch prediction"}
    assert model.calls == []


def test_missing_token_is_a_failed_prediction(client):
    use_model(RentModelClient("RentPrediction/Fin_analysis", token=None))

    response = client.post("/api/predict", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch prediction"}


def test_default_dependency_reads_token_per_request(monkeypatch):
    monkeypatch.setenv("HF_TOKEN", "first")
    assert get_model_client().token == "first"
    monkeypatch.setenv("HF_TOKEN", "second")
    assert get_model_client().token == "second"
