from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
import logging

from quizgen.config import settings
from quizgen.errors import ConfigurationError, GenerationError
from quizgen.models import Difficulty
from quizgen.quiz import generate_quiz

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Quiz Generation Backend", version="1.0")

# -----------------------------
# MODELS
# -----------------------------

class QuizRequest(BaseModel):
    topic: str = Field(..., min_length=1)
    num_questions: int = Field(default=5, ge=1, le=200)
    difficulty: Difficulty = Difficulty.MEDIUM

# -----------------------------
# ROUTES
# -----------------------------

@app.get("/")
def root():
    return {"message": "Quiz Generation Backend is running"}

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/generate-quiz")
def generate_quiz_api(req: QuizRequest):
    try:
        result = generate_quiz(
            topic=req.topic,
            count=req.num_questions,
            difficulty=req.difficulty,
            settings=settings,
        )

        return {
            "status": "success",
            "count": result.count,
            "title": result.title,
            "description": result.description,
            "difficulty": result.difficulty.value,
            "questions": result.to_question_records(),
        }

    except ValueError as ve:
        # Blank topic after trimming etc.
        raise HTTPException(status_code=422, detail=str(ve))

    except ConfigurationError:
        logger.exception("[API] Generation service not configured")
        raise HTTPException(status_code=500, detail="Quiz generation is not configured")

    except GenerationError:
        logger.exception("[API] Quiz generation failed")
        raise HTTPException(status_code=502, detail="Failed to generate quiz. Please try again.")
