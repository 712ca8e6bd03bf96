from datetime import date

import pytest
from fastapi.testclient import TestClient

from core import translation
from main import app


@pytest.fixture
def client(store):
    # No `with` block: the lifespan (DB pool) is not started.
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_pets_pagination_and_filter(client, store):
    owner = store.add_owner()
    for i in range(15):
        store.add_pet(owner["id"], species="Cat" if i < 4 else "Dog")

    page = client.get("/pets", params={"start": 10, "limit": 12}).json()
    cats = client.get("/pets", params={"species": "cat"}).json()

    assert len(page["pets"]) == 5
    assert page["total_count"] == 15
    assert cats["total_count"] == 4
    assert cats["limit"] == 12
    assert page["pets"][0]["owner"]["id"] == owner["id"]


def test_list_pets_rejects_bad_page(client):
    assert client.get("/pets", params={"start": -1}).status_code == 422
    assert client.get("/pets", params={"limit": 1000}).status_code == 400


def test_pet_crud_roundtrip(client, store):
    owner = store.add_owner()
    other = store.add_owner("Bob", "Durand")
    payload = {
        "name": "Milo",
        "date_of_birth": "2019-04-12",
        "species": "Cat",
        "breed": "Persian",
        "color": "Grey",
        "weight": 3.8,
        "owner_id": owner["id"],
    }

    created = client.post("/pets", json=payload)
    assert created.status_code == 201
    pet_id = created.json()["id"]

    assert client.get(f"/pets/{pet_id}").json()["date_of_birth"] == "2019-04-12"

    moved = client.patch(f"/pets/{pet_id}", json={"owner_id": other["id"]})
    assert moved.status_code == 200
    assert moved.json()["owner_id"] == other["id"]
    assert moved.json()["name"] == "Milo"

    assert client.delete(f"/pets/{pet_id}").json() == {"ok": True, "pet_id": pet_id}
    assert client.get(f"/pets/{pet_id}").status_code == 404


def test_create_pet_validation_and_missing_owner(client, store):
    payload = {
        "name": "Milo",
        "date_of_birth": "2019-04-12",
        "species": "Cat",
        "breed": "Persian",
        "color": "Grey",
        "weight": -1,
        "owner_id": 1,
    }
    assert client.post("/pets", json=payload).status_code == 422

    payload["weight"] = 3.0
    response = client.post("/pets", json=payload)
    assert response.status_code == 404
    assert store.pets == {}


def test_pet_statistics_endpoints(client, store):
    assert client.get("/pets/most-common-species").json() == {"species": None}
    assert client.get("/pets/heaviest").json() == {"pets": None}
    assert client.get("/pets/oldest").json() == {"pets": []}

    owner = store.add_owner("Jeanne", "Moreau")
    store.add_pet(owner["id"], species="Dog", date_of_birth=date(2010, 1, 1), weight=30.0)
    store.add_pet(owner["id"], species="Cat", date_of_birth=date(2010, 1, 1), weight=30.0)

    oldest = client.get("/pets/oldest").json()["pets"]
    species = client.get("/pets/most-common-species").json()["species"]
    heaviest = client.get("/pets/heaviest").json()["pets"]

    assert len(oldest) == 2
    assert sorted(s["species"] for s in species) == ["Cat", "Dog"]
    assert {p["owner_full_name"] for p in heaviest} == {"Jeanne Moreau"}


def test_pet_with_owner_survives_translation_outage(client, store, monkeypatch):
    owner = store.add_owner()
    pet = store.add_pet(owner["id"], breed="Beagle", color="Tan", species="Dog")

    async def down(text, **kwargs):
        raise translation.TranslationError("service unavailable")

    monkeypatch.setattr(translation, "translate_text", down)

    response = client.get(f"/pets/{pet['id']}/with-owner")

    assert response.status_code == 200
    body = response.json()
    assert body["owner"]["id"] == owner["id"]
    assert body["breed_translated"] == "Beagle"
    assert body["species_translated"] == "Dog"


def test_owner_endpoints(client, store):
    created = client.post(
        "/owners",
        json={"last_name": "Durand", "first_name": "Bob", "email": "bob@example.com", "phone_number": "0611"},
    )
    assert created.status_code == 201
    owner_id = created.json()["id"]
    store.add_pet(owner_id, species="Cat")

    assert client.patch(f"/owners/{owner_id}", json={"phone_number": "0622"}).json()["phone_number"] == "0622"
    assert len(client.get(f"/owners/{owner_id}/with-pets").json()["pets"]) == 1
    assert client.get("/owners").json()["total_count"] == 1
    assert client.get("/owners/top").json()["owners"][0]["count"] == 1
    assert client.get("/owners/top-by-species", params={"species": "cat"}).json()["owners"][0]["owner_id"] == owner_id
    assert client.get("/owners/top-by-species", params={"species": " "}).status_code == 400
    assert client.get("/owners/heaviest-groups").json()["owners"][0]["total_weight"] == 10.0

    assert client.delete(f"/owners/{owner_id}").status_code == 409
    assert client.delete(f"/owners/{owner_id}/with-pets").json()["pets_deleted"] == 1
    assert client.get(f"/owners/{owner_id}").status_code == 404
