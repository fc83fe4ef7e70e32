# tests/conftest.py
import sys
from pathlib import Path

import httpx
import pytest

# ---------- Ensure project root on sys.path ----------
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from check_cdap.config import CheckConfig  # noqa: E402

CDAP_ENVS = ("CHECK_CDAP_URI", "CHECK_CDAP_TIMEOUT", "CHECK_CDAP_TOKEN")


# Keep a developer's shell env or .env out of the tests
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for k in CDAP_ENVS:
        # setenv first so teardown also drops values a test loaded from .env
        monkeypatch.setenv(k, "")
        monkeypatch.delenv(k)
    monkeypatch.setattr("check_cdap.cli.check_cdap.load_dotenv", lambda *a, **kw: False)
    yield


@pytest.fixture
def cfg():
    return CheckConfig(uri="http://cdap.test:11015")


@pytest.fixture
def mock_client():
    """
    Build an httpx.Client whose transport answers every request with
    (status_code, body) and records the requests it saw.
    """

    def _make(status_code: int = 200, body: str = "", exc: type[Exception] | None = None):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if exc is not None:
                raise exc("simulated failure", request=request)
            return httpx.Response(status_code, text=body)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        client.seen = seen
        return client

    return _make
