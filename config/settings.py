from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    # Polygonscan (block explorer)
    polygonscan_api_key: str = ""
    polygonscan_api_url: str = "https://api.polygonscan.com/api"
    explorer_timeout_sec: float = 15.0

    # Chain JSON-RPC node
    provider_url: str = "https://polygon-rpc.com"
    rpc_timeout_sec: float = 10.0

    # LLM report (OpenAI-compatible chat completions, DeepSeek by default)
    llm_api_key: str = Field(
        default="", validation_alias=AliasChoices("llm_api_key", "deepseek_api_key")
    )
    llm_base_url: str = "https://api.deepseek.com/v1"
    llm_model: str = "deepseek-chat"
    llm_temperature: float = 0.3  # low temperature keeps the report fact-grounded
    llm_max_tokens: int = 4000
    llm_timeout_sec: float = 120.0  # long markdown reports are slow

    # Aggregation caps (explorer page size)
    holder_limit: int = 100
    transaction_limit: int = 100

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: str = "public"
    # Extra browser origins allowed to call the API; the bundled UI is same-origin
    cors_origins: list[str] = []


settings = Settings()
