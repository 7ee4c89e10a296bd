from unittest.mock import patch

import pytest

from src.app.errors import HashError


@pytest.mark.asyncio
async def test_hash_is_salted_and_verifiable(hasher):
    first = await hasher.hash("correct horse")
    second = await hasher.hash("correct horse")

    assert first != second
    assert first != "correct horse"
    assert await hasher.verify("correct horse", first)
    assert await hasher.verify("correct horse", second)


@pytest.mark.asyncio
async def test_verify_wrong_password_returns_false(hasher):
    password_hash = await hasher.hash("correct horse")

    assert await hasher.verify("battery staple", password_hash) is False


@pytest.mark.asyncio
async def test_verify_malformed_hash_returns_false(hasher):
    assert await hasher.verify("anything", "not-a-bcrypt-hash") is False


@pytest.mark.asyncio
async def test_dummy_verify_does_not_raise(hasher):
    await hasher.dummy_verify("anything")


@pytest.mark.asyncio
async def test_hash_failure_raises_hash_error(hasher):
    with patch(
        "src.adapter.services.bcrypt_password_hasher.bcrypt.hashpw",
        side_effect=MemoryError,
    ):
        with pytest.raises(HashError):
            await hasher.hash("correct horse")


@pytest.mark.asyncio
async def test_long_password_is_hashed_and_verified(hasher):
    long_password = "x" * 80

    password_hash = await hasher.hash(long_password)

    assert await hasher.verify(long_password, password_hash)
    assert await hasher.verify("y" * 80, password_hash) is False


@pytest.mark.asyncio
async def test_only_first_72_bytes_count(hasher):
    password_hash = await hasher.hash("x" * 72 + "tail")

    assert await hasher.verify("x" * 72 + "other", password_hash)


@pytest.mark.asyncio
async def test_long_multibyte_password_is_verified(hasher):
    password = "é" * 50

    password_hash = await hasher.hash(password)

    assert await hasher.verify(password, password_hash)


@pytest.mark.asyncio
async def test_dummy_verify_accepts_long_password(hasher):
    await hasher.dummy_verify("x" * 80)
