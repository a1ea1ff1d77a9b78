import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from insight_notes.errors import (
    ApiError,
    ApiKeyMissingError,
    MalformedResponseError,
    UnexpectedSchemaError,
)
from insight_notes.llm.config import LlmConfig
from insight_notes.llm.providers import ProviderConfig, build_providers, get_endpoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SamplingParams:
    temperature: float = 0.0
    top_p: float = 0.95
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.5


def build_chat_body(
    system_prompt: str, user_prompt: str, model: str, params: SamplingParams
) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        "temperature": params.temperature,
        "top_p": params.top_p,
        "frequency_penalty": params.frequency_penalty,
        "presence_penalty": params.presence_penalty,
    }


def build_embedding_body(text: str, model: str) -> dict[str, Any]:
    return {"model": model, "input": text}


class LlmGateway:
    """Chat-completion and embedding calls against OpenAI-compatible endpoints.

    One request per call, no retries. The API key is taken from the
    ``LlmConfig`` handed in at construction.
    """

    def __init__(
        self,
        config: LlmConfig,
        client: httpx.Client | None = None,
        providers: tuple[ProviderConfig, ...] | None = None,
    ):
        self.config = config
        self.providers = providers if providers is not None else build_providers(config.lmstudio_url)
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.config.timeout)
        return self._client

    def close(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "LlmGateway":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def chat_complete(
        self,
        system_prompt: str,
        user_prompt: str,
        model: str | None = None,
        params: SamplingParams | None = None,
    ) -> str:
        model = model or self.config.llm_model
        body = build_chat_body(system_prompt, user_prompt, model, params or SamplingParams())
        data = self._post(get_endpoint(model, "chat", self.providers), body)

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as error:
            raise UnexpectedSchemaError("Invalid response structure for chat completions") from error
        if not isinstance(content, str):
            raise UnexpectedSchemaError("chat completion content must be a string")
        return content

    def embed(self, text: str, model: str | None = None) -> list[float]:
        model = model or self.config.embedding_model
        body = build_embedding_body(text, model)
        data = self._post(get_endpoint(model, "embedding", self.providers), body)

        try:
            embedding = data["data"][0]["embedding"]
        except (KeyError, IndexError, TypeError) as error:
            raise UnexpectedSchemaError("Invalid response structure for embeddings") from error
        if not isinstance(embedding, list) or not embedding:
            raise UnexpectedSchemaError("embedding must be a non-empty list of numbers")
        if any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in embedding):
            raise UnexpectedSchemaError("embedding must be a non-empty list of numbers")
        return [float(v) for v in embedding]

    def has_api_key(self) -> bool:
        return self.config.has_api_key()

    def check_api_key(self) -> None:
        self.chat_complete("", "test")

    def _headers(self) -> dict[str, str]:
        if not self.config.has_api_key():
            raise ApiKeyMissingError()
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }

    def _post(self, url: str, body: dict[str, Any]) -> Any:
        headers = self._headers()
        logger.debug("Sending request to %s", url)
        try:
            response = self.client.post(url, headers=headers, content=json.dumps(body))
        except httpx.RequestError as error:
            raise ApiError(None, str(error)) from error

        logger.debug("Response status: %s", response.status_code)
        if response.status_code >= 400:
            raise ApiError(response.status_code, response.text[:200])

        try:
            return json.loads(response.text)
        except json.JSONDecodeError as error:
            raise MalformedResponseError("Invalid response format") from error
