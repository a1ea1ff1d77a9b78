from dataclasses import dataclass

from insight_notes.llm.config import DEFAULT_LMSTUDIO_URL


@dataclass(frozen=True)
class ProviderConfig:
    name: str
    patterns: tuple[str, ...]
    chat_url: str
    embedding_url: str


OPENAI = ProviderConfig(
    name="openai",
    patterns=("openai", "gpt", "text-embedding"),
    chat_url="https://api.openai.com/v1/chat/completions",
    embedding_url="https://api.openai.com/v1/embeddings",
)
GLM = ProviderConfig(
    name="glm",
    patterns=("glm", "embedding-2", "embedding-3"),
    chat_url="https://open.bigmodel.cn/api/paas/v4/chat/completions",
    embedding_url="https://open.bigmodel.cn/api/paas/v4/embeddings",
)
OPENROUTER = ProviderConfig(
    name="openrouter",
    patterns=("openrouter",),
    chat_url="https://openrouter.ai/api/v1/chat/completions",
    embedding_url="https://openrouter.ai/api/v1/embeddings",
)
LLAMA = ProviderConfig(
    name="llama",
    patterns=("llama",),
    chat_url="https://api.llama.ai/v1/chat/completions",
    embedding_url="https://api.llama.ai/v1/embeddings",
)

DEFAULT_PROVIDER = OPENAI


def lmstudio_provider(base_url: str = DEFAULT_LMSTUDIO_URL) -> ProviderConfig:
    base = base_url.rstrip("/")
    return ProviderConfig(
        name="lmstudio",
        patterns=("lmstudio",),
        chat_url=f"{base}/v1/chat/completions",
        embedding_url=f"{base}/v1/embeddings",
    )


def build_providers(lmstudio_url: str = DEFAULT_LMSTUDIO_URL) -> tuple[ProviderConfig, ...]:
    return (OPENAI, GLM, OPENROUTER, lmstudio_provider(lmstudio_url), LLAMA)


def resolve_provider(
    model: str,
    providers: tuple[ProviderConfig, ...],
    default: ProviderConfig = DEFAULT_PROVIDER,
) -> ProviderConfig:
    """Pick the provider whose longest pattern occurs in ``model``.

    Ties keep table order; no match returns ``default``.
    """
    best: ProviderConfig | None = None
    best_length = 0
    for provider in providers:
        for pattern in provider.patterns:
            if pattern in model and len(pattern) > best_length:
                best = provider
                best_length = len(pattern)
    return best if best is not None else default


def get_endpoint(model: str, kind: str, providers: tuple[ProviderConfig, ...]) -> str:
    provider = resolve_provider(model, providers)
    if kind == "chat":
        return provider.chat_url
    if kind == "embedding":
        return provider.embedding_url
    raise ValueError(f"unknown endpoint kind: {kind}")
