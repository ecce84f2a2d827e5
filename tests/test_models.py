import pytest
from pydantic import ValidationError

from quizgen.models import (
    Conversation,
    Difficulty,
    GenerationRequest,
    GenerationResult,
    QuestionDraft,
)


def test_question_draft_accepts_wire_aliases():
    q = QuestionDraft.model_validate({
        "questionText": "2 + 2?",
        "options": ["3", "4", "5"],
        "correctAnswer": 1,
    })
    assert q.text == "2 + 2?"
    assert q.correct_index == 1
    assert q.correct_answer == "4"
    assert not q.is_true_false


def test_true_false_draft():
    q = QuestionDraft(text="Water is wet.", options=["True", "False"], correct_index=0)
    assert q.is_true_false
    assert q.correct_answer == "True"


@pytest.mark.parametrize("options", [["only"], ["a", "b", "c", "d", "e", "f"], ["a", "  "]])
def test_question_draft_rejects_bad_options(options):
    with pytest.raises(ValidationError):
        QuestionDraft(text="Q?", options=options, correct_index=0)


@pytest.mark.parametrize("index", [-1, 2])
def test_question_draft_rejects_out_of_range_index(index):
    with pytest.raises(ValidationError):
        QuestionDraft(text="Q?", options=["a", "b"], correct_index=index)


def test_generation_request_validation():
    req = GenerationRequest(topic="  Photosynthesis ", requested_count=10, difficulty="hard")
    assert req.topic == "Photosynthesis"
    assert req.difficulty is Difficulty.HARD

    with pytest.raises(ValidationError):
        GenerationRequest(topic="   ", requested_count=10, difficulty="Easy")
    with pytest.raises(ValidationError):
        GenerationRequest(topic="Math", requested_count=0, difficulty="Easy")
    with pytest.raises(ValidationError):
        GenerationRequest(topic="Math", requested_count=5, difficulty="Impossible")


def test_result_difficulty_is_lenient():
    result = GenerationResult.model_validate({
        "title": "t",
        "description": "d",
        "difficulty": "Easy | Medium | Hard",
        "questions": [],
    })
    assert result.difficulty is None
    assert GenerationResult.model_validate({"difficulty": "easy"}).difficulty is Difficulty.EASY


def test_to_question_records():
    result = GenerationResult(
        title="t",
        description="d",
        questions=[
            QuestionDraft(text="Q1", options=["x", "y", "z"], correct_index=2),
            QuestionDraft(text="Q2", options=["True", "False"], correct_index=1),
        ],
    )
    assert result.to_question_records() == [
        {"question_text": "Q1", "options": ["x", "y", "z"], "correct_answer": "z", "order_index": 0},
        {"question_text": "Q2", "options": ["True", "False"], "correct_answer": "False", "order_index": 1},
    ]


def test_conversation_is_immutable():
    base = Conversation.start("sys", "user")
    longer = base.with_turn("assistant", "{}")

    assert len(base) == 2
    assert len(longer) == 3
    assert longer.as_messages()[-1] == {"role": "assistant", "content": "{}"}
    with pytest.raises(ValidationError):
        base.turns = ()
