from typing import Optional

from quizgen.models import Partition

SYSTEM_PROMPT = """
You are an AI Quiz Generation Engine.

Your ONLY responsibility is to generate quiz content in strict JSON format.

-----------------------------------
DIFFICULTY CONTROL:
Maintain difficulty level exactly as requested:
Easy -> Basic recall and simple understanding
Medium -> Conceptual and application-based
Hard -> Analytical and multi-step reasoning

-----------------------------------
QUESTION QUALITY RULES:
- Questions must be educational and factually correct
- Avoid duplicate or repetitive questions
- Avoid ambiguous or opinion-based questions
- Use clear student-friendly language
- Randomize the correct answer position, avoid patterns in correct answer indexes

-----------------------------------
QUESTION TYPE RULES:
If MCQ:
- Provide 2 to 5 options
- Only ONE correct answer

If True/False:
- Options must be exactly: ["True", "False"]
- Correct answer index must be 0 or 1

-----------------------------------
STRICT OUTPUT FORMAT:
Return ONLY valid JSON.
NO explanations, NO markdown, NO text before or after JSON, NO comments.

JSON SCHEMA:
{
  "title": "string",
  "description": "string",
  "difficulty": "Easy | Medium | Hard",
  "questions": [
    {
      "questionText": "string",
      "options": ["string"],
      "correctAnswer": number
    }
  ]
}

-----------------------------------
VALIDATION RULES:
- Minimum 1 question must be generated
- Each question must contain minimum 2 options
- Maximum 5 options allowed
- correctAnswer must be a valid index into options
- Title must reflect the quiz topic
- Description must briefly explain the quiz purpose

-----------------------------------
SAFETY RULES:
Do not generate:
- Harmful content
- Political bias questions
- Adult or unsafe content
- Personal opinion based questions
- Copies of copyright restricted text

Return ONLY the JSON quiz object.
"""


def build_user_prompt(
    topic: str,
    count: int,
    difficulty: str,
    partition: Optional[Partition] = None,
) -> str:
    batch_note = ""
    if partition is not None and partition.total > 1:
        batch_note = (
            f"\n\nNote: This is batch {partition.index} of {partition.total}. "
            "Generate unique questions that don't overlap with other batches."
        )

    return (
        f"Generate EXACTLY {count} {difficulty} level quiz questions about: {topic}{batch_note}\n\n"
        f"CRITICAL: You MUST generate EXACTLY {count} questions. No more, no less.\n"
        f"Count the questions before returning to ensure you have exactly {count} questions in the array."
    )


def build_correction_prompt(actual: int, requested: int) -> str:
    # NOTE: worded for a shortfall; an over-generated set yields a negative "more"
    missing = requested - actual
    return (
        f"You generated {actual} questions, but I need EXACTLY {requested} questions. "
        f"Please generate {missing} more questions on the same topic to reach exactly "
        f"{requested} total questions. Return the complete quiz with all {requested} questions."
    )
