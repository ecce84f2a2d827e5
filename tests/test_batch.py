import pytest

from conftest import FakeClient, make_payload
from quizgen.batch import build_batch_conversation, generate_batch
from quizgen.models import Difficulty, Partition
from quizgen.prompts import SYSTEM_PROMPT


def test_conversation_shape_and_count_redundancy():
    conversation = build_batch_conversation("Cell Biology", 12, Difficulty.MEDIUM)

    system, user = conversation.turns
    assert system.role == "system" and system.content == SYSTEM_PROMPT
    assert user.role == "user"
    assert "EXACTLY 12 Medium level quiz questions about: Cell Biology" in user.content
    assert "Count the questions before returning" in user.content
    assert "batch" not in user.content


def test_system_prompt_carries_structural_and_safety_rules():
    assert '["True", "False"]' in SYSTEM_PROMPT
    assert "2 to 5 options" in SYSTEM_PROMPT
    assert '"correctAnswer": number' in SYSTEM_PROMPT
    assert "Return ONLY valid JSON" in SYSTEM_PROMPT
    assert "Political bias" in SYSTEM_PROMPT
    assert "copyright" in SYSTEM_PROMPT


def test_single_partition_gets_no_batch_note():
    conversation = build_batch_conversation("X", 5, Difficulty.EASY, Partition(index=1, total=1, size=5))
    assert "batch" not in conversation.turns[1].content


def test_batch_note_when_partitioned():
    conversation = build_batch_conversation("X", 25, Difficulty.HARD, Partition(index=2, total=3, size=25))
    assert "This is batch 2 of 3" in conversation.turns[1].content
    assert "don't overlap with other batches" in conversation.turns[1].content


def test_generate_batch_returns_result_unmodified():
    content = make_payload(7)
    client = FakeClient(content)

    batch = generate_batch(client, "Geometry", 5, Difficulty.EASY)

    assert batch.result.count == 7
    assert batch.completion.content == content
    assert client.calls == [batch.conversation]


def test_generate_batch_rejects_empty_size():
    with pytest.raises(ValueError):
        generate_batch(FakeClient(), "Geometry", 0, Difficulty.EASY)
