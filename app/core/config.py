from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Website Enricher API"
    env: str = "dev"
    log_level: str = "INFO"
    observability_enabled: bool = True

    enrich_user_agent: str = "vc-scout-enricher/0.1 (+https://example.com; bot for enrichment demo)"
    enrich_accept_header: str = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
    enrich_http_timeout_seconds: float = 20.0
    fetch_follow_redirects: bool = True
    enrich_single_flight: bool = False

    # Heuristic cutoffs. Changing them changes every enrichment result.
    summary_min_sentence_length: int = 40
    summary_max_sentences: int = 2
    what_they_do_window: int = 15
    what_they_do_limit: int = 4
    keyword_limit: int = 10
    signal_fallback_count: int = 2

    @model_validator(mode="after")
    def validate_tunables(self) -> "Settings":
        tunables = {
            "summary_max_sentences": self.summary_max_sentences,
            "what_they_do_window": self.what_they_do_window,
            "what_they_do_limit": self.what_they_do_limit,
            "keyword_limit": self.keyword_limit,
        }
        for name, value in tunables.items():
            if value < 1:
                raise ValueError(f"{name} must be a positive integer")
        if self.summary_min_sentence_length < 0 or self.signal_fallback_count < 0:
            raise ValueError("summary_min_sentence_length and signal_fallback_count must not be negative")
        if self.enrich_http_timeout_seconds <= 0:
            raise ValueError("enrich_http_timeout_seconds must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
