import pytest
from sqlalchemy.exc import IntegrityError

from app.errors import NotFoundError, ValidationError
from app.toko import services
from app.toko.utils import parse_profile_payload

PROFILE = {
    "name": "CV Maju Jaya",
    "address": "Jl. Asia Afrika No. 10, Bandung",
    "phone": "022-1234567",
    "email": "admin@majujaya.co.id",
    "npwp": "01.234.567.8-901.000",
}


def test_get_store_profile_when_empty_returns_none(app):
    assert services.get_store_profile() is None


def test_first_profile_wins(app):
    first = services.create_store_profile(dict(PROFILE))
    services.create_store_profile(dict(PROFILE, name="Toko Kedua"))

    assert services.get_store_profile().id == first.id


def test_update_profile_refreshes_updated_at(app):
    profile = services.create_store_profile(dict(PROFILE))
    before = profile.updated_at

    updated = services.update_store_profile(profile.id, {"phone": "022-7654321"})

    assert updated.phone == "022-7654321"
    assert updated.name == PROFILE["name"]
    assert updated.updated_at >= before


def test_update_missing_profile_raises_not_found(app):
    with pytest.raises(NotFoundError):
        services.update_store_profile(99, {"name": "X"})


@pytest.mark.parametrize("overrides", [
    {"name": ""},
    {"address": "   "},
    {"email": "bukan-email"},
    {"npwp": None},
])
def test_invalid_profile_payload(overrides):
    with pytest.raises(ValidationError):
        parse_profile_payload(dict(PROFILE, **overrides))


def test_partial_payload_only_checks_supplied_fields():
    assert parse_profile_payload({"phone": " 0812 "}, partial=True) == {"phone": "0812"}


def test_profile_routes(client):
    assert client.get("/api/toko").get_json() is None

    response = client.post("/api/toko", json=PROFILE)
    assert response.status_code == 201
    profile_id = response.get_json()["id"]

    response = client.patch(f"/api/toko/{profile_id}", json={"email": "kontak@majujaya.co.id"})
    assert response.status_code == 200
    assert client.get("/api/toko").get_json()["email"] == "kontak@majujaya.co.id"


def test_profile_route_rejects_bad_email(client):
    response = client.post("/api/toko", json=dict(PROFILE, email="salah"))

    assert response.status_code == 400
    assert "email" in response.get_json()["error"]


def test_profile_route_missing_id(client):
    response = client.patch("/api/toko/7", json={"name": "X"})

    assert response.status_code == 404


def test_failed_create_leaves_session_usable(app):
    with pytest.raises(IntegrityError):
        services.create_store_profile(dict(PROFILE, name=None))

    assert services.get_store_profile() is None


def test_failed_update_is_rolled_back(app):
    profile = services.create_store_profile(dict(PROFILE))

    with pytest.raises(IntegrityError):
        services.update_store_profile(profile.id, {"name": None, "phone": "0000"})

    reloaded = services.get_store_profile()
    assert reloaded.name == PROFILE["name"]
    assert reloaded.phone == PROFILE["phone"]
