from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_upload_bytes: int = 10 * 1024 * 1024

    pdf_engine: str = "pdfplumber"
    pdf_decode_timeout_seconds: float = 5.0
    pdf_max_pages: int = 15
    pdf_page_char_limit: int = 2000
    pdf_structure_scan_pages: int = 3
    pdf_line_tolerance: float = 3.0
    pdf_paragraph_gap: float = 18.0

    ocr_engine: str = "tesseract"
    ocr_languages: str = "eng"
    ocr_binarize_threshold: int = 128

    enrichment_provider: str = "openai"
    enrichment_max_input_chars: int = 12000

    enrichment_openai_api_key: str = ""
    enrichment_openai_model_name: str = "gpt-4o-mini"
    enrichment_openai_timeout_seconds: int = 30
    enrichment_openai_temperature: float = 0.2

    enrichment_openai_compatible_api_key: str = ""
    enrichment_openai_compatible_model_name: str = ""
    enrichment_openai_compatible_base_url: str = ""
    enrichment_openai_compatible_timeout_seconds: int = 30

    enrichment_openrouter_api_key: str = ""
    enrichment_openrouter_model_name: str = ""
    enrichment_openrouter_timeout_seconds: int = 30

    enrichment_groq_api_key: str = ""
    enrichment_groq_model_name: str = ""
    enrichment_groq_timeout_seconds: int = 30

    enrichment_together_api_key: str = ""
    enrichment_together_model_name: str = ""
    enrichment_together_timeout_seconds: int = 30

    enrichment_deepseek_api_key: str = ""
    enrichment_deepseek_model_name: str = ""
    enrichment_deepseek_timeout_seconds: int = 30

    enrichment_ollama_api_key: str = "ollama"
    enrichment_ollama_model_name: str = ""
    enrichment_ollama_timeout_seconds: int = 60
