import pytest
from httpx import AsyncClient

from tests.utils.app_factory import ADMIN_EMAIL, TestConfig, build_client
from tests.utils.account_helpers import (
    count_sessions,
    fetch_user,
    login,
    register,
    register_and_login,
)


async def _ids(db_session, *emails):
    return [(await fetch_user(db_session, e)).id for e in emails]


@pytest.mark.asyncio
async def test_list_users_requires_session(client: AsyncClient):
    get_response = await client.get("/api/users")
    post_response = await client.post("/api/users")

    assert get_response.status_code == 401
    assert post_response.status_code == 401
    assert get_response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_list_users_requires_admin_role(client: AsyncClient):
    await register_and_login(client, "member@example.com")

    response = await client.get("/api/users")

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_list_users_ordered_without_hash(client: AsyncClient):
    await register(client, "bob@example.com", name="Bob")
    await register(client, "carol@example.com", name="Carol")
    await register_and_login(client, ADMIN_EMAIL)

    for method in ("GET", "POST"):
        response = await client.request(method, "/api/users")

        assert response.status_code == 200
        users = response.json()
        assert [u["email"] for u in users] == [
            "bob@example.com",
            "carol@example.com",
            ADMIN_EMAIL,
        ]
        ids = [u["id"] for u in users]
        assert ids == sorted(ids)
        for user in users:
            assert set(user) == {"id", "name", "email", "status", "role", "last_login"}


@pytest.mark.asyncio
async def test_bulk_block_then_delete(client: AsyncClient, db_session):
    await register(client, "bob@example.com")
    await register(client, "carol@example.com")
    await register_and_login(client, ADMIN_EMAIL)
    bob_id, carol_id = await _ids(db_session, "bob@example.com", "carol@example.com")

    response = await client.patch("/api/users/block", json={"ids": [bob_id, carol_id]})

    assert response.status_code == 200
    assert response.json()["message"] == "block successful"
    assert response.json()["affected"] == 2
    assert (await fetch_user(db_session, "bob@example.com")).status == "blocked"
    assert (await fetch_user(db_session, "carol@example.com")).status == "blocked"

    response = await client.patch("/api/users/delete", json={"ids": [bob_id]})

    assert response.status_code == 200
    assert response.json()["message"] == "delete successful"
    assert await fetch_user(db_session, "bob@example.com") is None
    assert await fetch_user(db_session, "carol@example.com") is not None


@pytest.mark.asyncio
async def test_bulk_unblock_restores_login(client: AsyncClient, other_client, db_session):
    await register(client, "bob@example.com")
    await register_and_login(client, ADMIN_EMAIL)
    (bob_id,) = await _ids(db_session, "bob@example.com")

    await client.patch("/api/users/block", json={"ids": [bob_id]})
    assert (await login(other_client, "bob@example.com")).status_code == 403

    await client.patch("/api/users/unblock", json={"ids": [bob_id]})
    assert (await login(other_client, "bob@example.com")).status_code == 200


@pytest.mark.asyncio
async def test_bulk_invalid_action(client: AsyncClient, db_session):
    await register(client, "bob@example.com")
    await register_and_login(client, ADMIN_EMAIL)
    (bob_id,) = await _ids(db_session, "bob@example.com")

    response = await client.patch("/api/users/bogus", json={"ids": [bob_id]})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ACTION"
    assert (await fetch_user(db_session, "bob@example.com")).status == "active"


@pytest.mark.asyncio
async def test_bulk_ignores_unknown_ids(client: AsyncClient, db_session):
    await register(client, "bob@example.com")
    await register_and_login(client, ADMIN_EMAIL)
    (bob_id,) = await _ids(db_session, "bob@example.com")

    response = await client.patch("/api/users/block", json={"ids": [bob_id, 9999]})

    assert response.status_code == 200
    assert response.json()["affected"] == 1


@pytest.mark.asyncio
async def test_bulk_requires_session(client: AsyncClient):
    response = await client.patch("/api/users/block", json={"ids": [1]})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_bulk_forbidden_for_member(client: AsyncClient):
    await register_and_login(client, "member@example.com")

    response = await client.patch("/api/users/block", json={"ids": [1]})

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_blocking_revokes_live_sessions(
    client: AsyncClient, other_client: AsyncClient, db_session
):
    """A user blocked while logged in loses the session immediately"""
    await register_and_login(other_client, "bob@example.com")
    await register_and_login(client, ADMIN_EMAIL)
    (bob_id,) = await _ids(db_session, "bob@example.com")
    assert await count_sessions(db_session, bob_id) == 1

    await client.patch("/api/users/block", json={"ids": [bob_id]})

    assert await count_sessions(db_session, bob_id) == 0


class OpenAdminConfig(TestConfig):
    ADMIN_EMAILS = []
    REQUIRE_ADMIN_ROLE = False


@pytest.mark.asyncio
async def test_any_session_manages_users_without_role_check(db_session):
    async with build_client(db_session, OpenAdminConfig) as client:
        await register(client, "bob@example.com")
        await register_and_login(client, "member@example.com")
        (bob_id,) = await _ids(db_session, "bob@example.com")

        list_response = await client.get("/api/users")
        bulk_response = await client.patch("/api/users/block", json={"ids": [bob_id]})

    assert list_response.status_code == 200
    assert len(list_response.json()) == 2
    assert bulk_response.status_code == 200
    assert (await fetch_user(db_session, "bob@example.com")).status == "blocked"


@pytest.mark.asyncio
async def test_session_still_required_without_role_check(db_session):
    async with build_client(db_session, OpenAdminConfig) as client:
        response = await client.get("/api/users")

    assert response.status_code == 401
