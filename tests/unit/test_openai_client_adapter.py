from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from report_analyzer.enrichment.exceptions import EnrichmentError, EnrichmentNetworkError
from report_analyzer.enrichment.models import EnrichmentRequest
from report_analyzer.enrichment.openai_client_adapter import OpenAIClientAdapter


def _response(content: str | None, finish_reason: str = "stop") -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    choice.finish_reason = finish_reason
    response = MagicMock()
    response.choices = [choice]
    return response


def _complete(mock_client: MagicMock, system_prompt: str = "system") -> str:
    request = EnrichmentRequest(
        model="m",
        user_prompt="user",
        json_schema={"type": "object"},
        temperature=0.1,
        system_prompt=system_prompt,
    )
    with patch(
        "report_analyzer.enrichment.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
        return adapter.complete(request)


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _response('{"ok": true}')
        assert _complete(mock_client) == '{"ok": true}'

    def test_disables_sdk_retries(self) -> None:
        with patch("report_analyzer.enrichment.openai_client_adapter.openai.OpenAI") as ctor:
            OpenAIClientAdapter(api_key="k", timeout_seconds=5, base_url="http://host/v1")
        ctor.assert_called_once_with(
            api_key="k", timeout=5, base_url="http://host/v1", max_retries=0
        )

    def test_requests_schema_constrained_json(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _response("{}")
        _complete(mock_client)
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "m"
        assert kwargs["temperature"] == 0.1
        assert kwargs["response_format"] == {
            "type": "json_schema",
            "json_schema": {
                "name": "enrichment_result",
                "strict": True,
                "schema": {"type": "object"},
            },
        }

    def test_sends_system_then_user_message(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _response("{}")
        _complete(mock_client)
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert [m["role"] for m in messages] == ["system", "user"]

    def test_omits_empty_system_prompt(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _response("{}")
        _complete(mock_client, system_prompt="")
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages == [{"role": "user", "content": "user"}]

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _response(None)
        with pytest.raises(EnrichmentError, match="empty response"):
            _complete(mock_client)

    def test_raises_error_for_truncated_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _response('{"narr', "length")
        with pytest.raises(EnrichmentError, match="token limit"):
            _complete(mock_client)

    def test_raises_error_for_no_choices(self) -> None:
        response = MagicMock()
        response.choices = []
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = response
        with pytest.raises(EnrichmentError, match="no choices"):
            _complete(mock_client)

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(EnrichmentNetworkError, match="network error"):
            _complete(mock_client)

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(EnrichmentNetworkError, match="network error"):
            _complete(mock_client)

    def test_raises_network_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(EnrichmentNetworkError, match="API error"):
            _complete(mock_client)
