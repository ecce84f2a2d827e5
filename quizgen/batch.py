from dataclasses import dataclass
import logging
from typing import Optional

from quizgen.llm_providers import GenerationClient
from quizgen.models import Completion, Conversation, Difficulty, GenerationResult, Partition
from quizgen.prompts import SYSTEM_PROMPT, build_user_prompt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Batch:
    conversation: Conversation   # the turns that produced this batch
    completion: Completion

    @property
    def result(self) -> GenerationResult:
        return self.completion.result


def build_batch_conversation(
    topic: str,
    size: int,
    difficulty: Difficulty,
    partition: Optional[Partition] = None,
) -> Conversation:
    return Conversation.start(
        SYSTEM_PROMPT,
        build_user_prompt(topic, size, Difficulty(difficulty).value, partition),
    )


def generate_batch(
    client: GenerationClient,
    topic: str,
    size: int,
    difficulty: Difficulty,
    partition: Optional[Partition] = None,
) -> Batch:
    """
    Ask the service for one self-contained set of `size` questions.

    The decoded result is returned as-is; count correction belongs to
    the reconciler (single batch) or is skipped (chunked path).
    """
    if size < 1:
        raise ValueError(f"Batch size must be positive, got {size}")

    if partition is not None:
        logger.info(f"[BATCH] Generating batch {partition.index}/{partition.total} ({size} questions)")
    else:
        logger.info(f"[BATCH] Generating single batch ({size} questions)")

    conversation = build_batch_conversation(topic, size, difficulty, partition)
    completion = client.complete(conversation)
    return Batch(conversation=conversation, completion=completion)
