"""
- Keep every test independent of the developer's shell / .env
- Provide small fixtures for games with a known secret
- Provide a fake random.org response so no test ever touches the network
"""
import pytest
import requests

from guessing_game.engine import GuessingGame

GAME_ENV_VARS = (
    "GUESSING_GAME_MIN",
    "GUESSING_GAME_MAX",
    "GUESSING_GAME_SEED",
    "GUESSING_GAME_RANDOM_ORG",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove any GUESSING_GAME_* variables so settings start from defaults."""
    for name in GAME_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # load_dotenv() must not pick up a local .env during tests
    monkeypatch.setattr("guessing_game.config.load_dotenv", lambda *args, **kwargs: False)
    yield


@pytest.fixture
def game_42() -> GuessingGame:
    """Range 1..100, secret 42."""
    return GuessingGame.with_fixed_secret(1, 100, 42)


class FakeResponse:
    """Just enough of requests.Response for RandomOrgSecretSource."""

    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


@pytest.fixture
def fake_random_org(monkeypatch):
    """
    Returns a function: call it with the body (and optional status) random.org should answer.
    Every requests.get call is recorded in the returned `calls` list.
    """
    calls = []

    def install(text: str, status_code: int = 200):
        def fake_get(url, params=None, timeout=None):
            calls.append({"url": url, "params": params, "timeout": timeout})
            return FakeResponse(text, status_code)
        monkeypatch.setattr("guessing_game.secret_source.requests.get", fake_get)
        return calls

    return install
