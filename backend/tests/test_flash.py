"""
Campus Web — Flash Message Tests
==================================

Flashes live in the signed session cookie, so every flash() must leave the
session marked modified; otherwise the cookie is not rewritten and the
message is lost.
"""

import pytest
import pytest_asyncio
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from starlette.middleware.sessions import SessionMiddleware

from campusweb.flash import FLASH_KEY, flash, pop_flashes


def build_app() -> FastAPI:
    app = FastAPI()

    @app.get("/add/{category}/{message}")
    async def add(request: Request, category: str, message: str):
        flash(request, category, message)
        return {"ok": True}

    @app.get("/add-twice")
    async def add_twice(request: Request):
        flash(request, "error", "first")
        flash(request, "error", "second")
        return {"ok": True}

    @app.get("/show")
    async def show(request: Request):
        return pop_flashes(request)

    app.add_middleware(SessionMiddleware, secret_key="flash-test-secret")
    return app


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=build_app())
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_flashes_accumulate_across_requests(client):
    await client.get("/add/success/registered")
    response = await client.get("/add/warning/duplicate")
    assert "set-cookie" in response.headers

    shown = (await client.get("/show")).json()
    assert shown == {"success": ["registered"], "warning": ["duplicate"]}


@pytest.mark.asyncio
async def test_several_flashes_in_one_request(client):
    await client.get("/add-twice")
    assert (await client.get("/show")).json() == {"error": ["first", "second"]}


@pytest.mark.asyncio
async def test_flashes_are_shown_once(client):
    await client.get("/add/success/hello")
    await client.get("/show")
    assert (await client.get("/show")).json() == {}


class TestWithoutSession:
    def setup_method(self):
        self.request = Request({"type": "http", "method": "GET", "path": "/", "headers": []})

    def test_flash_is_a_no_op(self):
        flash(self.request, "error", "ignored")
        assert FLASH_KEY not in self.request.scope

    def test_pop_returns_empty(self):
        assert pop_flashes(self.request) == {}
