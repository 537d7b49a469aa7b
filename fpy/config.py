import os
from typing import Optional, Mapping
from pydantic import BaseModel, Field

ENV_PREFIX = "FPY_"


class Settings(BaseModel):
    BATCH_SIZE: int = Field(default=1000, gt=0)
    DEBOUNCE_MS: float = Field(default=300, ge=0)
    BENCHMARK_RUNS: int = Field(default=1000, gt=0)
    LOG_LEVEL: str = "WARNING"

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """read FPY_* overrides from the environment"""
        environ = os.environ if environ is None else environ
        overrides = {
            name: environ[ENV_PREFIX + name]
            for name in cls.model_fields
            if ENV_PREFIX + name in environ
        }
        return cls(**overrides)


settings = Settings.load()
