import os

import httpx
import pytest


def pytest_collection_modifyitems(config, items):
    skip_integration = os.getenv("SKIP_INTEGRATION", "").lower() in ("1", "true", "yes")
    integration_marker = pytest.mark.skip(reason="SKIP_INTEGRATION is set")

    for item in items:
        if "integration" in item.keywords and skip_integration:
            item.add_marker(integration_marker)


@pytest.fixture
def live_llm_config():
    from insight_notes.llm.config import LlmConfig

    api_key = os.getenv("INSIGHT_NOTES_API_KEY") or os.getenv("OPENAI_API_KEY", "")
    return LlmConfig(
        api_key=api_key,
        llm_model=os.getenv("INSIGHT_NOTES_LLM_MODEL", "gpt-4o-mini"),
        embedding_model=os.getenv("INSIGHT_NOTES_EMBED_MODEL", "text-embedding-3-small"),
    )


@pytest.fixture
def llm_available(live_llm_config):
    if not live_llm_config.has_api_key():
        return False
    try:
        response = httpx.get(
            "https://api.openai.com/v1/models",
            headers={"Authorization": f"Bearer {live_llm_config.api_key}"},
            timeout=10.0,
        )
        return response.status_code == 200
    except httpx.HTTPError:
        return False


@pytest.fixture
def skip_if_no_llm(llm_available):
    if not llm_available:
        pytest.skip("LLM API key not configured or endpoint unreachable")
