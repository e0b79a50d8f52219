import pytest
from fastapi.testclient import TestClient

from assetbook.app.api.dependencies import get_register
from assetbook.app.main import create_app
from assetbook.app.services.register import AssetRegister, InMemoryAssetStore, RegisterStorageError


ASSET_PAYLOAD = {
    "name": "Delivery Van",
    "category": "vehicles",
    "cost": 100000.0,
    "residual_value": 10000.0,
    "purchase_date": "2021-02-15",
    "useful_life": 5,
    "method": "declining_balance",
    "rate": 20.0,
}


@pytest.fixture
def client():
    app = create_app()
    register = AssetRegister(InMemoryAssetStore())
    app.dependency_overrides[get_register] = lambda: register
    with TestClient(app) as test_client:
        yield test_client


def test_health_endpoint(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_straight_line_endpoint(client):
    payload = {"cost": 120000.0, "residual_value": 20000.0, "useful_life": 5}

    response = client.post("/depreciation/straight-line", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["method"] == "straight_line"
    assert len(data["schedule"]) == 6
    assert data["schedule"][3] == {
        "year": 3,
        "depreciation": 20000.0,
        "accumulated": 60000.0,
        "book_value": 60000.0,
    }
    assert data["total_depreciation"] == pytest.approx(100000.0)


def test_declining_balance_endpoint_defaults_rate(client):
    payload = {"cost": 100000.0, "residual_value": 10000.0, "useful_life": 5}

    default_rate = client.post("/depreciation/declining-balance", json=payload)
    explicit_rate = client.post("/depreciation/declining-balance", json={**payload, "rate": 20.0})
    assert default_rate.status_code == 200
    assert default_rate.json() == explicit_rate.json()
    year_two = default_rate.json()["schedule"][2]
    assert year_two["depreciation"] == pytest.approx(16000.0)
    assert year_two["book_value"] == pytest.approx(64000.0)


@pytest.mark.parametrize(
    "payload",
    [
        {"cost": 1000.0, "residual_value": 1500.0, "useful_life": 5},
        {"cost": 1000.0, "residual_value": 100.0, "useful_life": 0},
        {"cost": 0.0, "residual_value": 0.0, "useful_life": 3},
        {"cost": 1000.0, "residual_value": 100.0, "useful_life": 3, "rate": 0.0},
    ],
)
def test_invalid_inputs_are_rejected_at_the_boundary(client, payload):
    response = client.post("/depreciation/declining-balance", json=payload)
    assert response.status_code == 422


def test_chart_endpoint(client):
    payload = {"cost": 10000.0, "residual_value": 9000.0, "useful_life": 4, "method": "declining_balance", "rate": 50.0}

    response = client.post("/depreciation/chart", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["years"] == [1, 2, 3, 4]
    assert data["depreciation"] == [1000.0, 0.0, 0.0, 0.0]
    assert data["book_value"] == [9000.0] * 4


def test_category_endpoints(client):
    listing = client.get("/categories")
    assert listing.status_code == 200
    assert len(listing.json()) == 8

    assert client.get("/categories/computers").json()["useful_life"] == 3
    assert client.get("/categories/spaceships").status_code == 404

    suggestion = client.get("/categories/machinery/suggest", params={"cost": 50000})
    assert suggestion.status_code == 200
    assert suggestion.json() == {
        "category": "machinery",
        "useful_life": 10,
        "rate": 20.0,
        "residual_value": 5000.0,
    }


def test_asset_register_lifecycle(client):
    created = client.post("/assets", json=ASSET_PAYLOAD)
    assert created.status_code == 201
    asset = created.json()
    asset_id = asset["id"]
    assert len(asset["schedule"]) == 6

    assert client.get(f"/assets/{asset_id}").json() == asset
    assert client.get("/assets", params={"category": "vehicles"}).json() == [asset]
    assert client.get("/assets", params={"category": "computers"}).json() == []
    assert client.get("/assets/categories").json() == ["vehicles"]

    summary = client.get(f"/assets/{asset_id}/summary", params={"year": 2})
    assert summary.status_code == 200
    assert summary.json()["years_remaining"] == 3
    assert summary.json()["book_value"] == pytest.approx(64000.0)

    position = client.get(f"/assets/{asset_id}/position", params={"as_of": "2022-07-01"})
    assert position.json()["year"] == 1
    assert position.json()["book_value"] == pytest.approx(80000.0)

    updated = client.put(f"/assets/{asset_id}", json={**ASSET_PAYLOAD, "method": "straight_line", "rate": None})
    assert updated.status_code == 200
    assert updated.json()["schedule"][1]["depreciation"] == pytest.approx(18000.0)

    assert client.delete(f"/assets/{asset_id}").status_code == 204
    assert client.get(f"/assets/{asset_id}").status_code == 404
    assert client.delete(f"/assets/{asset_id}").status_code == 404


def test_asset_requires_name(client):
    response = client.post("/assets", json={**ASSET_PAYLOAD, "name": "  "})
    assert response.status_code == 422


def test_schedule_exports(client):
    payload = {"cost": 120000.0, "residual_value": 20000.0, "useful_life": 5, "asset_name": "Delivery Van"}

    csv_response = client.post("/export/schedule.csv", json=payload)
    assert csv_response.status_code == 200
    assert csv_response.headers["content-type"].startswith("text/csv")
    assert 'filename="Delivery_Van_depreciation_schedule.csv"' in csv_response.headers["content-disposition"]
    assert "3,20000.00,60000.00,60000.00" in csv_response.text

    pdf_response = client.post("/export/schedule.pdf", json=payload)
    assert pdf_response.status_code == 200
    assert pdf_response.content.startswith(b"%PDF")


def test_asset_and_register_exports(client):
    asset_id = client.post("/assets", json=ASSET_PAYLOAD).json()["id"]

    asset_csv = client.get(f"/export/assets/{asset_id}.csv")
    assert asset_csv.status_code == 200
    assert "1,20000.00,20000.00,80000.00" in asset_csv.text

    assert client.get(f"/export/assets/{asset_id}.pdf").content.startswith(b"%PDF")
    assert client.get(f"/export/assets/{asset_id}.xlsx").status_code == 404
    assert client.get("/export/assets/missing.csv").status_code == 404

    register_csv = client.get("/export/register.csv")
    assert register_csv.status_code == 200
    lines = register_csv.text.strip().split("\n")
    assert lines[0].startswith("Asset Name,Type,Purchase Cost")
    assert lines[1].startswith("Delivery Van,vehicles,100000.00,2021-02-15,5,Declining Balance,")

    register_pdf = client.get("/export/register.pdf")
    assert register_pdf.status_code == 200
    assert register_pdf.content.startswith(b"%PDF")


class FailingStore(InMemoryAssetStore):
    def put(self, asset):
        raise RegisterStorageError("Unable to write asset register at /readonly/register.json.")


def test_storage_failure_returns_server_error():
    app = create_app()
    register = AssetRegister(FailingStore())
    app.dependency_overrides[get_register] = lambda: register

    with TestClient(app) as failing_client:
        response = failing_client.post("/assets", json=ASSET_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"detail": "Unable to write asset register at /readonly/register.json."}
    assert register.list() == []
