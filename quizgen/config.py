import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Requests at or above this size are split into partitions
CHUNK_THRESHOLD = 40
PARTITION_SIZE = 25
COUNT_TOLERANCE_RATIO = 0.1


class Settings:
    """
    Completion-service configuration.

    Values default to the environment but every field can be passed
    explicitly, so a client can be built without touching process state.
    """

    def __init__(
        self,
        groq_api_key: Optional[str] = None,
        llm_provider: Optional[str] = None,
        groq_model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        from_env: bool = True,
    ):
        env = os.getenv if from_env else (lambda name, default=None: default)

        self.GROQ_API_KEY = groq_api_key if groq_api_key is not None else env("GROQ_API_KEY")
        self.LLM_PROVIDER = (llm_provider or env("LLM_PROVIDER", "groq")).lower()

        # ✅ ACTIVE MODEL
        self.GROQ_MODEL = groq_model or env("GROQ_MODEL", "llama-3.3-70b-versatile")
        self.TEMPERATURE = (
            temperature if temperature is not None
            else float(env("GROQ_TEMPERATURE", "0.5"))
        )
        self.MAX_TOKENS = (
            max_tokens if max_tokens is not None
            else int(env("GROQ_MAX_TOKENS", "8000"))
        )

    def __repr__(self):
        key_state = "set" if self.GROQ_API_KEY else "missing"
        return f"Settings(provider={self.LLM_PROVIDER!r}, model={self.GROQ_MODEL!r}, api_key={key_state})"


settings = Settings()
