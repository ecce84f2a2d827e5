import logging
import math
from typing import List

from quizgen.batch import generate_batch
from quizgen.config import CHUNK_THRESHOLD, PARTITION_SIZE
from quizgen.llm_providers import GenerationClient
from quizgen.models import GenerationRequest, GenerationResult, Partition, QuestionDraft

logger = logging.getLogger(__name__)


def requires_chunking(requested_count: int) -> bool:
    return requested_count >= CHUNK_THRESHOLD


def plan(requested_count: int) -> List[Partition]:
    """
    Split a request into partitions of at most PARTITION_SIZE.

    Every partition except possibly the last is full; sizes sum to
    requested_count.
    """
    if requested_count < 1:
        raise ValueError(f"requested_count must be positive, got {requested_count}")

    total = math.ceil(requested_count / PARTITION_SIZE)
    partitions = []
    allocated = 0
    for index in range(1, total + 1):
        size = min(PARTITION_SIZE, requested_count - allocated)
        partitions.append(Partition(index=index, total=total, size=size))
        allocated += size
    return partitions


def generate_in_chunks(client: GenerationClient, request: GenerationRequest) -> GenerationResult:
    """
    Generate partitions one after another and merge them.

    Title and description come from the first partition. The merged list is
    truncated to the requested count but never padded. Any client error
    aborts the whole call; partitions already received are dropped.
    """
    partitions = plan(request.requested_count)
    logger.info(
        f"[CHUNK] Generating {request.requested_count} questions in {len(partitions)} chunk(s)"
    )

    questions: List[QuestionDraft] = []
    title = ""
    description = ""

    for partition in partitions:
        batch = generate_batch(
            client,
            request.topic,
            partition.size,
            request.difficulty,
            partition=partition,
        )

        if partition.index == 1:
            title = batch.result.title
            description = batch.result.description

        questions.extend(batch.result.questions)
        remaining = max(0, request.requested_count - len(questions))
        logger.info(
            f"[CHUNK] Chunk {partition.index}/{partition.total} returned "
            f"{batch.result.count}/{partition.size} (still needed: {remaining})"
        )

    if len(questions) < request.requested_count:
        logger.warning(
            f"[CHUNK] Short by {request.requested_count - len(questions)} questions, returning as-is"
        )

    return GenerationResult(
        title=title,
        description=description,
        difficulty=request.difficulty,
        questions=questions[:request.requested_count],
    )
