import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_LLM_MODEL = "gpt-4o-mini"
DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"
DEFAULT_LMSTUDIO_URL = "http://localhost:1234"
DEFAULT_TIMEOUT = 60.0


@dataclass
class LlmConfig:
    api_key: str = ""
    llm_model: str = DEFAULT_LLM_MODEL
    embedding_model: str = DEFAULT_EMBEDDING_MODEL
    lmstudio_url: str = DEFAULT_LMSTUDIO_URL
    timeout: float = DEFAULT_TIMEOUT
    api_key_tested_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "api_key": self.api_key,
            "llm_model": self.llm_model,
            "embedding_model": self.embedding_model,
            "lmstudio_url": self.lmstudio_url,
            "timeout": self.timeout,
            "api_key_tested_at": self.api_key_tested_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LlmConfig":
        return cls(
            api_key=data.get("api_key", ""),
            llm_model=data.get("llm_model", DEFAULT_LLM_MODEL),
            embedding_model=data.get("embedding_model", DEFAULT_EMBEDDING_MODEL),
            lmstudio_url=data.get("lmstudio_url", DEFAULT_LMSTUDIO_URL),
            timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
            api_key_tested_at=data.get("api_key_tested_at"),
        )

    def has_api_key(self) -> bool:
        return bool(self.api_key.strip())


def _get_config_path() -> Path:
    base = os.getenv("INSIGHT_NOTES_STATE_FILE", ".insight_notes/state.json")
    config_dir = Path(base).parent
    return config_dir / "llm_config.json"


def get_llm_config() -> LlmConfig:
    config_path = _get_config_path()
    if config_path.exists():
        try:
            with open(config_path) as f:
                data = json.load(f)
            return LlmConfig.from_dict(data)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError):
            pass

    env_api_key = os.getenv("INSIGHT_NOTES_API_KEY") or os.getenv("OPENAI_API_KEY", "")

    return LlmConfig(
        api_key=env_api_key,
        llm_model=os.getenv("INSIGHT_NOTES_LLM_MODEL", DEFAULT_LLM_MODEL),
        embedding_model=os.getenv("INSIGHT_NOTES_EMBED_MODEL", DEFAULT_EMBEDDING_MODEL),
        lmstudio_url=os.getenv("INSIGHT_NOTES_LMSTUDIO_URL", DEFAULT_LMSTUDIO_URL),
    )


def save_llm_config(config: LlmConfig) -> None:
    config_path = _get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config.to_dict(), f, indent=2)
