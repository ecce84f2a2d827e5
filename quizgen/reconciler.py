from enum import Enum
import logging
import math

from quizgen.batch import Batch
from quizgen.config import COUNT_TOLERANCE_RATIO
from quizgen.llm_providers import GenerationClient
from quizgen.models import Conversation, GenerationRequest, GenerationResult
from quizgen.prompts import build_correction_prompt

logger = logging.getLogger(__name__)


class ReconcileState(str, Enum):
    UNVERIFIED = "unverified"
    CORRECTION_REQUESTED = "correction_requested"
    ACCEPTED = "accepted"


def count_tolerance(requested_count: int) -> int:
    return max(1, math.floor(requested_count * COUNT_TOLERANCE_RATIO))


def within_tolerance(requested_count: int, actual_count: int) -> bool:
    return abs(actual_count - requested_count) <= count_tolerance(requested_count)


def build_correction_conversation(batch: Batch, requested_count: int) -> Conversation:
    """Replay the first attempt verbatim and ask for the complete corrected set."""
    return (
        batch.conversation
        .with_turn("assistant", batch.completion.content)
        .with_turn("user", build_correction_prompt(batch.result.count, requested_count))
    )


def reconcile(client: GenerationClient, request: GenerationRequest, batch: Batch) -> GenerationResult:
    """
    Accept a single-batch result or issue exactly one corrective call.

    Count mismatch never raises: whatever the corrective call returns is
    final. Only client errors propagate.
    """
    state = ReconcileState.UNVERIFIED
    requested = request.requested_count
    actual = batch.result.count

    if actual == requested:
        state = ReconcileState.ACCEPTED
        logger.info(f"[RECONCILE] {state.value}: exact count ({actual})")
        return batch.result

    logger.warning(f"[RECONCILE] Generated {actual} questions instead of {requested}")

    if within_tolerance(requested, actual):
        state = ReconcileState.ACCEPTED
        logger.info(
            f"[RECONCILE] {state.value}: {actual} within tolerance ±{count_tolerance(requested)}"
        )
        return batch.result

    state = ReconcileState.CORRECTION_REQUESTED
    logger.info(f"[RECONCILE] {state.value}: asking for {requested - actual} more")
    completion = client.complete(build_correction_conversation(batch, requested))

    state = ReconcileState.ACCEPTED
    logger.info(f"[RECONCILE] {state.value}: corrective call returned {completion.result.count}")
    return completion.result
