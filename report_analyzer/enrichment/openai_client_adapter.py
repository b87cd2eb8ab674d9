import httpx
import openai
from openai.types.chat import ChatCompletion

from report_analyzer.enrichment.client_base import BaseEnrichmentClient
from report_analyzer.enrichment.exceptions import EnrichmentError, EnrichmentNetworkError
from report_analyzer.enrichment.models import EnrichmentRequest

_NETWORK_ERRORS = (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException)


class OpenAIClientAdapter(BaseEnrichmentClient):
    """Talks to OpenAI or any host exposing the same chat completions API.

    SDK retries are off, so each call makes exactly one request.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def complete(self, request: EnrichmentRequest) -> str:
        try:
            response = self._client.chat.completions.create(
                model=request.model,
                temperature=request.temperature,
                messages=self._messages(request),
                response_format=self._response_format(request),
            )
        except _NETWORK_ERRORS as exc:
            raise EnrichmentNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise EnrichmentNetworkError(f"AI provider API error: {exc}") from exc
        return self._content(response)

    @staticmethod
    def _messages(request: EnrichmentRequest) -> list[dict[str, str]]:
        messages = []
        if request.system_prompt:
            messages.append({"role": "system", "content": request.system_prompt})
        messages.append({"role": "user", "content": request.user_prompt})
        return messages

    @staticmethod
    def _response_format(request: EnrichmentRequest) -> dict[str, object]:
        return {
            "type": "json_schema",
            "json_schema": {
                "name": request.schema_name,
                "strict": True,
                "schema": request.json_schema,
            },
        }

    @staticmethod
    def _content(response: ChatCompletion) -> str:
        if not response.choices:
            raise EnrichmentError("AI returned no choices")
        choice = response.choices[0]
        if choice.finish_reason == "length":
            raise EnrichmentError("AI response was cut off at the token limit")
        content = choice.message.content
        if content is None:
            raise EnrichmentError("AI returned empty response")
        return content
