import json
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from quizgen.errors import GenerationError
from quizgen.llm_providers import GenerationClient, check_conversation, parse_payload
from quizgen.models import Completion

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_payload(n, title="Python Basics", description="A quiz about Python", start=0):
    """Service-shaped JSON with n questions; every 3rd one is True/False."""
    questions = []
    for i in range(start, start + n):
        if i % 3 == 2:
            questions.append({
                "questionText": f"Statement {i} is correct.",
                "options": ["True", "False"],
                "correctAnswer": i % 2,
            })
        else:
            questions.append({
                "questionText": f"Question {i}?",
                "options": ["A", "B", "C", "D"],
                "correctAnswer": i % 4,
            })
    return json.dumps({
        "title": title,
        "description": description,
        "difficulty": "Medium",
        "questions": questions,
    })


class FakeClient(GenerationClient):
    """Replays scripted contents (or raises scripted errors) and records each conversation."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def complete(self, conversation):
        check_conversation(conversation)
        self.calls.append(conversation)
        response = self.responses.pop(0)
        if isinstance(response, GenerationError):
            raise response
        return Completion(content=response, result=parse_payload(response))
