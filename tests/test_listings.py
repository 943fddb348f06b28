"""
Tests de anuncios de cuidadores y de la búsqueda
"""
import pytest
from bson import ObjectId
from datetime import datetime, timezone
from decimal import Decimal

from pawsit.services.bookings import create_booking


def listing_payload(sitter_id: str, **extra):
    payload = {
        "sitter_id": sitter_id,
        "title": "Cuidado en casa con jardín",
        "description": "Tengo jardín y mucha paciencia con perros grandes",
        "services_offered": ["pet_sitting", "overnight_care"],
        "price_per_hour": 15,
        "price_per_day": 90,
        "price_per_night": None,
        "max_dogs": 2,
        "accepts_sizes": ["medium", "large"],
        "location": "Valencia",
        "radius_km": 10,
        "experience_years": 5,
        "has_yard": True,
        "has_insurance": True,
    }
    payload.update(extra)
    return payload


@pytest.mark.parametrize("role", ["sitter", "both"])
async def test_sitters_can_publish(ac, make_user, role):
    sitter = await make_user(role)
    r = await ac.post("/listings", json=listing_payload(sitter["id"]))
    assert r.status_code == 201
    body = r.json()
    assert body["is_active"] is True
    assert body["price_per_hour"] == 15
    assert body["price_per_day"] == 90
    assert body["price_per_night"] is None


async def test_owner_only_user_cannot_publish(ac, make_user):
    owner = await make_user("owner")
    r = await ac.post("/listings", json=listing_payload(owner["id"]))
    assert r.status_code == 403
    assert r.json()["kind"] == "NotASitter"


async def test_listing_requires_user(ac):
    r = await ac.post("/listings", json=listing_payload(str(ObjectId())))
    assert r.status_code == 404
    assert r.json()["kind"] == "UserNotFound"


@pytest.mark.parametrize("override", [
    {"price_per_hour": 0},
    {"price_per_day": -5},
    {"services_offered": []},
    {"accepts_sizes": []},
    {"max_dogs": 0},
    {"description": "corta"},
])
async def test_listing_schema_rules(ac, make_user, override):
    sitter = await make_user("sitter")
    r = await ac.post("/listings", json=listing_payload(sitter["id"], **override))
    assert r.status_code == 422


async def test_update_and_list_by_sitter(ac, make_user):
    sitter = await make_user("sitter")
    created = (await ac.post("/listings", json=listing_payload(sitter["id"]))).json()
    r = await ac.patch(f"/listings/{created['id']}", json={"price_per_night": 70, "is_active": False})
    assert r.status_code == 200
    assert r.json()["price_per_night"] == 70
    assert r.json()["price_per_day"] == 90

    # El cuidador ve también los inactivos
    r = await ac.get("/listings", params={"sitter_id": sitter["id"]})
    assert [l["id"] for l in r.json()] == [created["id"]]


async def test_update_missing_listing(ac):
    r = await ac.patch(f"/listings/{ObjectId()}", json={"title": "Nuevo"})
    assert r.status_code == 404
    assert r.json()["kind"] == "ListingNotFound"


async def test_search_filters(ac, make_user, make_listing):
    sitter = await make_user("sitter")
    cheap = await make_listing(sitter["id"], price_per_hour="12", location="Madrid", radius_km=3.0,
                               has_yard=True, experience_years=1)
    pricey = await make_listing(sitter["id"], price_per_hour="30", location="Madrid", radius_km=15.0,
                                has_insurance=True, experience_years=8,
                                services_offered=["overnight_care"], accepts_sizes=["large"])
    await make_listing(sitter["id"], location="Bilbao")
    await make_listing(sitter["id"], location="Madrid", is_active=False)

    async def ids(**params):
        r = await ac.get("/listings/search", params=params)
        assert r.status_code == 200
        return {l["id"] for l in r.json()}

    assert await ids(location="Madrid") == {cheap["id"], pricey["id"]}
    assert await ids(location="Madrid", radius_km=10) == {pricey["id"]}
    assert await ids(location="Madrid", max_price_per_hour=20) == {cheap["id"]}
    assert await ids(location="Madrid", service_type="dog_walking") == {cheap["id"]}
    assert await ids(location="Madrid", dog_size="large") == {pricey["id"]}
    assert await ids(location="Madrid", has_yard="true") == {cheap["id"]}
    assert await ids(location="Madrid", has_insurance="true") == {pricey["id"]}
    assert await ids(location="Madrid", min_experience_years=5) == {pricey["id"]}


@pytest.mark.parametrize("field", [
    "price_per_hour", "title", "description", "services_offered", "max_dogs", "accepts_sizes",
    "location", "radius_km", "experience_years", "has_yard", "has_insurance", "is_active",
])
async def test_update_listing_rejects_null_required_fields(ac, make_user, field):
    sitter = await make_user("sitter")
    created = (await ac.post("/listings", json=listing_payload(sitter["id"]))).json()
    r = await ac.patch(f"/listings/{created['id']}", json={field: None})
    assert r.status_code == 422

    r = await ac.get("/listings", params={"sitter_id": sitter["id"]})
    assert r.status_code == 200
    assert r.json()[0][field] == created[field]


async def test_listing_still_prices_after_null_rate_rejected(ac, store, make_user, make_dog):
    sitter = await make_user("sitter")
    owner = await make_user("owner")
    dog = await make_dog(owner["id"])
    listing = (await ac.post("/listings", json=listing_payload(sitter["id"]))).json()

    r = await ac.patch(f"/listings/{listing['id']}", json={"price_per_hour": None})
    assert r.status_code == 422

    booking = await create_booking(
        store, owner["id"], sitter["id"], dog["id"], listing["id"], "pet_sitting",
        datetime(2024, 6, 1, 10, 0, tzinfo=timezone.utc),
        datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc),
    )
    assert booking["total_price"] == Decimal("30.00")


async def test_update_listing_clears_nullable_rates(ac, make_user):
    sitter = await make_user("sitter")
    created = (await ac.post("/listings", json=listing_payload(sitter["id"], emergency_contact="600111222"))).json()
    r = await ac.patch(f"/listings/{created['id']}", json={"price_per_day": None, "emergency_contact": None})
    assert r.status_code == 200
    assert r.json()["price_per_day"] is None
    assert r.json()["emergency_contact"] is None
    assert r.json()["price_per_hour"] == 15
