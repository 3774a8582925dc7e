from __future__ import annotations

import logging
from typing import Dict, List

import uvicorn
from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from daily_quiz import DailyQuiz, load_pool, quiz_day
from daily_quiz.config import get_settings
from daily_quiz.logging_config import setup_logging


settings = get_settings()
setup_logging(settings.log_level, settings.log_format)
logger = logging.getLogger("daily_quiz.service")

app = FastAPI(title="Daily Quiz Service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

quiz = DailyQuiz(load_pool(settings.questions_path))
logger.info("Daily quiz ready: %d questions, quotas %s", len(quiz), quiz.quotas.as_dict())


class QuizQuestionResponse(BaseModel):
    id: str
    text: str
    options: Dict[str, str]
    correct: str
    difficulty: str


@app.get("/api/quiz", response_model=List[QuizQuestionResponse])
def get_quiz(user_id: str | None = Query(default=None, alias="userId")):
    try:
        user_id = user_id or settings.default_user_id
        day = quiz_day(rotation_size=settings.rotation_size)
        logger.debug(
            "Building quiz",
            extra={"user_id": user_id, "day_seed": day.day_seed},
        )
        questions = quiz.for_user(user_id, day_seed=day.day_seed, date_key=day.date_key)
        return [QuizQuestionResponse(**q.to_dict()) for q in questions]
    except Exception:
        logger.exception("Error generating quiz")
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to build quiz. Try again later."},
        )


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Daily Quiz API is running."


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
