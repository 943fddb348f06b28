# tests/test_users.py
import pytest
from bson import ObjectId
from fastapi import status

from pawsit.errors import EmailAlreadyRegistered
from pawsit.services.accounts import pwd
from pawsit.utils import utcnow


@pytest.mark.asyncio
async def test_create_and_get_user(ac, test_db):
    resp = await ac.post("/users", json={
        "email": "ana@test.com",
        "password": "password123",
        "first_name": "Ana",
        "last_name": "García",
        "phone": None,
        "role": "both",
        "location": "Madrid",
        "bio": None,
    })
    assert resp.status_code == status.HTTP_201_CREATED
    user = resp.json()
    assert user["role"] == "both"
    assert "password" not in user and "password_hash" not in user

    stored = await test_db.users.find_one({"email": "ana@test.com"})
    assert pwd.verify("password123", stored["password_hash"])

    resp = await ac.get(f"/users/{user['id']}")
    assert resp.status_code == 200
    assert resp.json()["email"] == "ana@test.com"


async def test_duplicate_email(ac):
    payload = {"email": "dup@test.com", "password": "password123", "first_name": "A",
               "last_name": "B", "role": "owner"}
    assert (await ac.post("/users", json=payload)).status_code == 201
    resp = await ac.post("/users", json=payload)
    assert resp.status_code == status.HTTP_409_CONFLICT
    assert resp.json()["kind"] == "EmailAlreadyRegistered"


async def test_short_password_and_bad_role(ac):
    base = {"email": "x@test.com", "first_name": "A", "last_name": "B"}
    resp = await ac.post("/users", json={**base, "password": "123", "role": "owner"})
    assert resp.status_code == 422
    resp = await ac.post("/users", json={**base, "password": "password123", "role": "admin"})
    assert resp.status_code == 422


async def test_get_missing_user(ac):
    resp = await ac.get(f"/users/{ObjectId()}")
    assert resp.status_code == 404
    assert resp.json()["kind"] == "UserNotFound"


async def test_update_user_partial(ac, make_user):
    user = await make_user("owner", bio="Hola", phone="+34600123456")
    resp = await ac.patch(f"/users/{user['id']}", json={"location": "Valencia", "bio": None})
    assert resp.status_code == 200
    body = resp.json()
    assert body["location"] == "Valencia"
    assert body["bio"] is None
    assert body["phone"] == "+34600123456"
    assert body["first_name"] == user["first_name"]


@pytest.mark.parametrize("field", ["first_name", "last_name"])
async def test_update_user_rejects_null_name(ac, make_user, field):
    user = await make_user("owner")
    resp = await ac.patch(f"/users/{user['id']}", json={field: None})
    assert resp.status_code == 422

    # El usuario sigue intacto y legible
    resp = await ac.get(f"/users/{user['id']}")
    assert resp.status_code == 200
    assert resp.json()[field] == user[field]


async def test_concurrent_signup_same_email(store):
    now = utcnow()
    doc = {"email": "carrera@test.com", "password_hash": "x", "first_name": "A", "last_name": "B",
           "role": "owner", "created_at": now, "updated_at": now}
    await store.insert_user(dict(doc))
    # Una segunda alta que pasó la comprobación previa choca con el índice único
    with pytest.raises(EmailAlreadyRegistered):
        await store.insert_user(dict(doc))
