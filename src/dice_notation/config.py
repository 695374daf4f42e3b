from __future__ import annotations

import random
import secrets

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DICE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    log_level: str = "WARNING"
    # Seeds a shared random.Random for reproducible rolls; unset means SystemRandom.
    rng_seed: int | None = None
    server_name: str = "dice-notation"


def make_rng(seed: int | None = None) -> random.Random:
    if seed is None:
        return secrets.SystemRandom()
    return random.Random(seed)


settings = Settings()
