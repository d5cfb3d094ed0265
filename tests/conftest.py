"""Shared fixtures - a fake X API served through httpx.MockTransport."""

import httpx
import pytest


API_BASE = "https://api.x.com"


def make_user(
    user_id: str = "100",
    username: str = "alice",
    name: str = "Alice",
    **extra,
) -> dict:
    """Raw X API user object."""
    user = {"id": user_id, "username": username, "name": name}
    user.update(extra)
    return user


def make_page(users: list[dict], next_token: str | None = None) -> dict:
    """Raw affiliates response envelope."""
    meta = {"result_count": len(users)}
    if next_token:
        meta["next_token"] = next_token
    return {"data": users, "meta": meta}


class FakeXApi:
    """
    Minimal stand-in for the users endpoints.

    `me` is the /2/users/me response, `pages` the successive affiliates
    responses. Entries may be dicts (served as 200 JSON) or httpx.Response.
    """

    def __init__(self):
        self.me: dict | httpx.Response = {"data": make_user()}
        self.pages: list[dict | httpx.Response] = []
        self.requests: list[httpx.Request] = []
        self._page_index = 0

    @property
    def affiliate_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/affiliates")]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path == "/2/users/me":
            return self._respond(self.me)

        if request.url.path.endswith("/affiliates"):
            if self._page_index >= len(self.pages):
                return httpx.Response(500, text="no more pages configured")
            page = self.pages[self._page_index]
            self._page_index += 1
            return self._respond(page)

        return httpx.Response(404, text="unknown endpoint")

    @staticmethod
    def _respond(payload: dict | httpx.Response) -> httpx.Response:
        if isinstance(payload, httpx.Response):
            return payload
        return httpx.Response(200, json=payload)

    def client(self, *args) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=API_BASE,
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def x_api() -> FakeXApi:
    return FakeXApi()
