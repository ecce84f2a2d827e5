from abc import ABC, abstractmethod
import json
import logging

from groq import Groq, GroqError
from pydantic import ValidationError

from quizgen.config import Settings
from quizgen.errors import ConfigurationError, EmptyResponse, MalformedResponse, UpstreamError
from quizgen.models import Completion, Conversation, GenerationResult

logger = logging.getLogger(__name__)


# ===========================
# ABSTRACT INTERFACE
# ===========================
class GenerationClient(ABC):
    @abstractmethod
    def complete(self, conversation: Conversation) -> Completion:
        """Send the turns, return the raw content and its validated quiz payload"""
        pass


def check_conversation(conversation: Conversation) -> None:
    if not conversation.turns:
        raise ValueError("conversation must contain at least one turn")
    if conversation.turns[0].role != "system":
        raise ValueError("conversation must start with a system turn")


def parse_payload(content: str) -> GenerationResult:
    """
    Decode service output and validate it against the quiz schema.

    Raises:
        MalformedResponse: content is not JSON or does not match the schema
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("questions"), list):
        raise MalformedResponse("Response must be an object with a 'questions' array")

    try:
        return GenerationResult.model_validate(data)
    except ValidationError as e:
        raise MalformedResponse(f"Response does not match quiz schema: {e}") from e


# ===========================
# GROQ PROVIDER
# ===========================
class GroqProvider(GenerationClient):
    def __init__(self, settings: Settings, client=None):
        if not settings.GROQ_API_KEY:
            raise ConfigurationError("GROQ_API_KEY not set")

        if client is None:
            client = Groq(api_key=settings.GROQ_API_KEY)

        self.client = client
        self.model = settings.GROQ_MODEL
        self.temperature = settings.TEMPERATURE
        self.max_tokens = settings.MAX_TOKENS
        logger.info(f"[GROQ] Provider initialized (model={self.model})")

    def complete(self, conversation: Conversation) -> Completion:
        check_conversation(conversation)
        logger.info(f"[GROQ] Requesting completion ({len(conversation)} turns)")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=conversation.as_messages(),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"},
            )
        except GroqError as e:
            logger.exception("[GROQ ERROR]")
            raise UpstreamError(f"Groq request failed: {e}") from e

        choices = response.choices or []
        content = choices[0].message.content if choices else None
        if not content or not content.strip():
            logger.error("[GROQ ERROR] No content received")
            raise EmptyResponse("No content received from AI")

        result = parse_payload(content)
        logger.info(f"[GROQ] Response decoded ({result.count} questions)")
        return Completion(content=content, result=result)


# ===========================
# FACTORY
# ===========================
def get_generation_client(settings: Settings) -> GenerationClient:
    """Build the configured client; fails before any network call"""
    if settings.LLM_PROVIDER == "groq":
        return GroqProvider(settings)
    raise ConfigurationError(f"Unknown LLM_PROVIDER: {settings.LLM_PROVIDER}")
