import logging
from typing import Optional

from quizgen.batch import generate_batch
from quizgen.chunking import generate_in_chunks, requires_chunking
from quizgen.config import Settings
from quizgen.llm_providers import GenerationClient, get_generation_client
from quizgen.models import GenerationRequest, GenerationResult
from quizgen.reconciler import reconcile

logger = logging.getLogger(__name__)


def generate_quiz(
    topic: str,
    count: int,
    difficulty: str = "Medium",
    settings: Optional[Settings] = None,
    client: Optional[GenerationClient] = None,
) -> GenerationResult:
    """
    Generate `count` quiz questions on `topic`.

    Args:
        topic: free-text subject
        count: requested number of questions
        difficulty: Easy, Medium or Hard
        settings: explicit configuration used to build a client
        client: pre-built client (takes precedence over settings)

    Returns:
        GenerationResult with difficulty echoing the request

    Raises:
        ConfigurationError: no credential configured (before any call)
        GenerationError: a completion call failed
        ValueError: invalid topic, count or difficulty
    """
    request = GenerationRequest(topic=topic, requested_count=count, difficulty=difficulty)

    if client is None:
        client = get_generation_client(settings if settings is not None else Settings())

    logger.info(
        f"[QUIZ] topic={request.topic!r} count={request.requested_count} "
        f"difficulty={request.difficulty.value}"
    )

    if requires_chunking(request.requested_count):
        logger.info(f"[QUIZ] Large request ({request.requested_count}), using chunking strategy")
        result = generate_in_chunks(client, request)
    else:
        batch = generate_batch(client, request.topic, request.requested_count, request.difficulty)
        result = reconcile(client, request, batch)

    return result.model_copy(update={"difficulty": request.difficulty})
