"""Engine settings, overridable from the environment or a local .env file."""
import os

from dotenv import load_dotenv

load_dotenv()


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


class Settings:
    SOURCE_LANGUAGE: str = os.getenv("VOCAB_QUIZ_SOURCE_LANGUAGE", "Somali")
    TARGET_LANGUAGE: str = os.getenv("VOCAB_QUIZ_TARGET_LANGUAGE", "English")
    LOG_LEVEL: str = os.getenv("VOCAB_QUIZ_LOG_LEVEL", "WARNING")

    DEFAULT_QUESTION_COUNT: int = _env_int("VOCAB_QUIZ_QUESTION_COUNT", 10)
    DEFAULT_TIME_PER_QUESTION: int = _env_int("VOCAB_QUIZ_TIME_PER_QUESTION", 30)
    MIN_TIME_PER_QUESTION: int = 5
    MAX_TIME_PER_QUESTION: int = 300

    # Mixed-mode direction table: 40% each way, 20% audio
    DIRECTION_WEIGHTS: tuple = (
        ("source-to-target", 0.4),
        ("target-to-source", 0.4),
        ("audio", 0.2),
    )

    SLOW_ANSWER_MS: int = _env_int("VOCAB_QUIZ_SLOW_ANSWER_MS", 15000)
    SLOW_ANSWER_RATIO: float = _env_float("VOCAB_QUIZ_SLOW_ANSWER_RATIO", 0.4)
    INCORRECT_RATIO: float = _env_float("VOCAB_QUIZ_INCORRECT_RATIO", 0.5)
    STRENGTH_ACCURACY: float = _env_float("VOCAB_QUIZ_STRENGTH_ACCURACY", 0.8)
    WEAKNESS_ACCURACY: float = _env_float("VOCAB_QUIZ_WEAKNESS_ACCURACY", 0.5)
    MIN_SAMPLES: int = _env_int("VOCAB_QUIZ_MIN_SAMPLES", 2)


settings = Settings()
