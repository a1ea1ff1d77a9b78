from insight_notes.llm.config import LlmConfig, get_llm_config, save_llm_config
from insight_notes.llm.gateway import LlmGateway, SamplingParams
from insight_notes.llm.providers import ProviderConfig, build_providers, resolve_provider

__all__ = [
    "LlmConfig",
    "get_llm_config",
    "save_llm_config",
    "LlmGateway",
    "SamplingParams",
    "ProviderConfig",
    "build_providers",
    "resolve_provider",
]
