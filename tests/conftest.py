import pytest
from httpx import ASGITransport, AsyncClient

from jokecard.main import create_app
from jokecard.routers.jokes import get_joke_client
from jokecard.schemas import Joke


class FakeJokeClient:
    def __init__(self, joke: Joke):
        self.joke = joke
        self.calls = []

    def fetch(self, params):
        self.calls.append(dict(params))
        return self.joke


@pytest.fixture(scope="session")
def app():
    app = create_app()
    return app


@pytest.fixture
def fake_joke_client():
    return FakeJokeClient(Joke(text="Why do programmers prefer dark mode?\n\nBecause light attracts bugs.", category="Programming"))


@pytest.fixture(autouse=True)
def override_joke_client(app, fake_joke_client):
    app.dependency_overrides[get_joke_client] = lambda: fake_joke_client
    yield
    app.dependency_overrides.pop(get_joke_client, None)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
