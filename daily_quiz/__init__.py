

from .models import Difficulty, Question, QuestionPool
from .quota import DAILY_SET_SIZE, DEFAULT_QUOTAS, QuotaConfigError, QuotaTable
from .shuffle import seeded_shuffle
from .builder import DailyQuiz, build_daily_set, build_user_quiz, group_by_difficulty
from .pool import PoolLoadError, load_pool
from .rotation import QuizDay, quiz_day

__all__ = [
    "Difficulty",
    "Question",
    "QuestionPool",
    "DAILY_SET_SIZE",
    "DEFAULT_QUOTAS",
    "QuotaConfigError",
    "QuotaTable",
    "seeded_shuffle",
    "DailyQuiz",
    "build_daily_set",
    "build_user_quiz",
    "group_by_difficulty",
    "PoolLoadError",
    "load_pool",
    "QuizDay",
    "quiz_day",
]
