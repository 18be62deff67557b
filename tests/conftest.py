import httpx
import pytest

import engine
from app import create_app
from config import settings
from models import Policy


@pytest.fixture(autouse=True)
def hermetic_settings(monkeypatch, tmp_path):
    """Keep tests independent of a developer's local .env.

    The source root points at a fresh temp dir and the default policy is
    pinned so assertions about it do not drift with local configuration.
    """
    sources = tmp_path / "sources"
    sources.mkdir(parents=True, exist_ok=True)

    monkeypatch.setattr(settings, "source_root", str(sources), raising=False)
    monkeypatch.setattr(settings, "default_policy", "default", raising=False)
    monkeypatch.setattr(settings, "default_block_patterns", ["eval(", "os.system"], raising=False)

    return sources


@pytest.fixture()
def policies():
    store = {"default": Policy(name="default", block_patterns=["eval(", "os.system"])}
    engine.init_stores(store)
    return store


@pytest.fixture()
async def client():
    app = create_app()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
