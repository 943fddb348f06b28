"""
Configuración de pytest para tests
"""
import pytest
from datetime import datetime, timezone
from uuid import uuid4
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

from pawsit.db import ensure_indexes, get_db
from pawsit.main import app
from pawsit.store import MongoStore
from pawsit.utils import to_decimal128, utcnow


def dt(s: str) -> datetime:
    """'2024-01-15T09:00' -> datetime UTC"""
    return datetime.fromisoformat(s).replace(tzinfo=timezone.utc)


@pytest.fixture
async def test_db():
    """Base de datos en memoria, limpia en cada test"""
    client = AsyncMongoMockClient()
    db = client[f"pawsit_test_{uuid4().hex[:8]}"]
    await ensure_indexes(db)
    yield db


@pytest.fixture
def store(test_db):
    return MongoStore(test_db)


@pytest.fixture
async def ac(test_db):
    """Cliente HTTP contra la app con la base de datos en memoria"""
    app.dependency_overrides[get_db] = lambda: test_db
    # Deshabilitar rate limiting en la app para tests
    app.state.limiter = None
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(store):
    counter = {"n": 0}

    async def _make(role: str = "owner", **extra):
        counter["n"] += 1
        now = utcnow()
        doc = {
            "email": f"user{counter['n']}@example.com",
            "password_hash": "x",
            "first_name": f"User{counter['n']}",
            "last_name": "Test",
            "phone": None,
            "profile_image_url": None,
            "role": role,
            "location": "Madrid",
            "bio": None,
            "created_at": now,
            "updated_at": now,
        }
        doc.update(extra)
        return await store.insert_user(doc)
    return _make


@pytest.fixture
def make_dog(store):
    async def _make(owner_id: str, **extra):
        now = utcnow()
        doc = {
            "owner_id": owner_id,
            "name": "Luna",
            "breed": None,
            "age": 3,
            "size": "medium",
            "weight": None,
            "temperament": ["friendly", "playful"],
            "medical_notes": None,
            "special_instructions": None,
            "profile_image_url": None,
            "is_active": True,
            "created_at": now,
            "updated_at": now,
        }
        doc.update(extra)
        return await store.insert_dog(doc)
    return _make


@pytest.fixture
def make_listing(store):
    async def _make(sitter_id: str, price_per_hour="25", price_per_day=None, price_per_night=None, **extra):
        now = utcnow()
        doc = {
            "sitter_id": sitter_id,
            "title": "Paseos por el Retiro",
            "description": "Cuido perros con cariño y experiencia",
            "services_offered": ["dog_walking", "pet_sitting", "daycare", "overnight_care", "grooming"],
            "price_per_hour": to_decimal128(price_per_hour),
            "price_per_day": to_decimal128(price_per_day),
            "price_per_night": to_decimal128(price_per_night),
            "max_dogs": 2,
            "accepts_sizes": ["small", "medium"],
            "location": "Madrid",
            "radius_km": 5.0,
            "experience_years": 3,
            "has_yard": False,
            "has_insurance": False,
            "emergency_contact": None,
            "is_active": True,
            "created_at": now,
            "updated_at": now,
        }
        doc.update(extra)
        return await store.insert_listing(doc)
    return _make


@pytest.fixture
def parties(make_user, make_dog, make_listing):
    """Dueño, cuidador, perro y anuncio coherentes entre sí"""
    async def _make(**listing_kwargs):
        owner = await make_user("owner")
        sitter = await make_user("sitter")
        dog = await make_dog(owner["id"])
        listing = await make_listing(sitter["id"], **listing_kwargs)
        return owner, sitter, dog, listing
    return _make
