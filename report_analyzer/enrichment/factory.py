from typing import Any, ClassVar

from report_analyzer.config.settings import Settings
from report_analyzer.enrichment.enricher import AiEnricher
from report_analyzer.enrichment.example_client_adapter import ExampleClientAdapter
from report_analyzer.enrichment.openai_client_adapter import OpenAIClientAdapter
from report_analyzer.logging.logger import Log


class EnricherFactory:
    """Builds the enricher selected by ``settings.enrichment_provider``.

    ``disabled`` yields None, ``example`` an offline enricher, and every other
    provider an OpenAI-protocol client configured from its
    ``enrichment_<provider>_*`` settings.
    """

    DISABLED = "disabled"
    OFFLINE = "example"
    CUSTOM_HOST = "openai_compatible"

    # None means the SDK's default endpoint.
    HOSTED_ENDPOINTS: ClassVar[dict[str, str | None]] = {
        "openai": None,
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> AiEnricher | None:
        provider = settings.enrichment_provider.strip().lower()
        if provider == cls.DISABLED:
            Log.info("AI enrichment disabled")
            return None
        if provider == cls.OFFLINE:
            return AiEnricher(
                client=ExampleClientAdapter(),
                model=cls.OFFLINE,
                temperature=0.0,
                max_input_chars=settings.enrichment_max_input_chars,
            )

        endpoint = cls._endpoint(provider, settings)
        timeout_seconds = cls._provider_setting(settings, provider, "timeout_seconds")
        Log.info(f"AI enrichment via '{provider}'", endpoint=endpoint or "default")
        return AiEnricher(
            client=OpenAIClientAdapter(
                api_key=cls._provider_setting(settings, provider, "api_key"),
                timeout_seconds=timeout_seconds,
                base_url=endpoint,
            ),
            model=cls._provider_setting(settings, provider, "model_name"),
            temperature=settings.enrichment_openai_temperature if provider == "openai" else 0.0,
            timeout_seconds=float(timeout_seconds),
            max_input_chars=settings.enrichment_max_input_chars,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return [cls.DISABLED, cls.OFFLINE, cls.CUSTOM_HOST, *cls.HOSTED_ENDPOINTS]

    @classmethod
    def _endpoint(cls, provider: str, settings: Settings) -> str | None:
        if provider in cls.HOSTED_ENDPOINTS:
            return cls.HOSTED_ENDPOINTS[provider]
        if provider != cls.CUSTOM_HOST:
            raise ValueError(
                f"Unknown enrichment provider '{provider}'. "
                f"Choose from: {cls.supported_providers()}"
            )
        custom = settings.enrichment_openai_compatible_base_url.strip()
        if not custom:
            raise ValueError(
                "enrichment_openai_compatible_base_url is required for "
                f"enrichment_provider={cls.CUSTOM_HOST}"
            )
        return custom

    @staticmethod
    def _provider_setting(settings: Settings, provider: str, suffix: str) -> Any:
        return getattr(settings, f"enrichment_{provider}_{suffix}")
