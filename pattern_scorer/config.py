from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Scoring configuration."""

    clamp_similarity: bool = False
    max_expansions: int = 4096
    stop_on_perfect_score: bool = True

    model_config = {
        "env_prefix": "PATTERN_SCORER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
