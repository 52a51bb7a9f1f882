"""
Shared helpers for end-to-end API tests.
"""

from typing import Awaitable, Callable

import pytest
from httpx import AsyncClient, Response

API = "/api/v1"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture
def register(client: AsyncClient) -> Callable[..., Awaitable[Response]]:
    """Factory registering a user through the multipart endpoint."""

    async def _register(
        username: str = "alice",
        email: str = "a@x.com",
        password: str = "s3cret-pass",
        full_name: str = "Alice Liddell",
        with_avatar: bool = True,
        with_cover: bool = False,
    ) -> Response:
        files = {}
        if with_avatar:
            files["avatar"] = ("avatar.png", PNG_BYTES, "image/png")
        if with_cover:
            files["coverImage"] = ("cover.png", PNG_BYTES, "image/png")
        return await client.post(
            f"{API}/users/register",
            data={
                "fullName": full_name,
                "email": email,
                "username": username,
                "password": password,
            },
            files=files or None,
        )

    return _register


@pytest.fixture
def login(client: AsyncClient) -> Callable[..., Awaitable[Response]]:
    """Factory logging in (session cookies land on the client)."""

    async def _login(email: str = "a@x.com", password: str = "s3cret-pass"):
        return await client.post(
            f"{API}/users/login", json={"email": email, "password": password}
        )

    return _login
