"""Quiz session lifecycle: start, answer question by question, finish."""
import logging
import random
from datetime import datetime

from vocab_quiz.config import settings
from vocab_quiz.models import QuizConfig, QuizResult, QuizSession
from vocab_quiz.quiz import calculate_score, generate_questions, validate_answer

logger = logging.getLogger(__name__)


class SessionClosedError(RuntimeError):
    """Raised when answering into a session that has already ended."""


def default_config() -> QuizConfig:
    return QuizConfig(
        question_count=settings.DEFAULT_QUESTION_COUNT,
        time_per_question=settings.DEFAULT_TIME_PER_QUESTION,
    )


def start_session(category_id: str, entries: list, config: QuizConfig = None,
                  rng: random.Random = None, questions: list = None) -> QuizSession:
    """Create a session for ``category_id``.

    Questions are generated from ``entries`` unless a prepared list (for
    example from the adaptive selector) is passed in.
    """
    config = config or default_config()
    if questions is None:
        questions = generate_questions(entries, config.question_count, config.direction, rng)
    now = datetime.now()
    session = QuizSession(
        id=f"quiz_{int(now.timestamp() * 1000)}",
        category_id=category_id,
        questions=list(questions),
        start_time=now,
    )
    if not session.questions:
        session.end_time = now
    logger.info("Started %s with %d questions", session.id, len(session.questions))
    return session


def is_complete(session: QuizSession) -> bool:
    return len(session.results) == len(session.questions)


def is_ended(session: QuizSession) -> bool:
    return session.end_time is not None


def current_question(session: QuizSession):
    if is_ended(session) or is_complete(session):
        return None
    return session.questions[len(session.results)]


def is_last_question(session: QuizSession) -> bool:
    return len(session.results) == len(session.questions) - 1


def get_progress(session: QuizSession) -> float:
    if not session.questions:
        return 0.0
    return len(session.results) / len(session.questions) * 100


def record_answer(session: QuizSession, answer: str, time_spent: int) -> QuizResult:
    """Grade ``answer`` against the current question and append the result.

    Args:
        session: The running session; mutated in place.
        answer: Submitted answer text; "" for a skip or timeout.
        time_spent: Elapsed milliseconds for this question.
    """
    if time_spent < 0:
        raise ValueError(f"time_spent must be non-negative, got {time_spent}")
    question = current_question(session)
    if question is None:
        raise SessionClosedError(f"Session {session.id} has already ended")

    result = QuizResult(
        question_id=question.id,
        entry_id=question.entry_id,
        user_answer=answer,
        correct_answer=question.correct_answer,
        is_correct=validate_answer(answer, question.correct_answer),
        time_spent=time_spent,
    )
    session.results.append(result)
    session.score = calculate_score(session.results)
    if is_complete(session):
        session.end_time = datetime.now()
        logger.info("Completed %s with score %d%%", session.id, session.score)
    return result


def skip_question(session: QuizSession, time_spent: int) -> QuizResult:
    return record_answer(session, "", time_spent)


def end_session(session: QuizSession) -> QuizSession:
    """Stop the session early; already recorded results are kept."""
    if not is_ended(session):
        session.end_time = datetime.now()
        if not is_complete(session):
            logger.info("Abandoned %s after %d of %d questions",
                        session.id, len(session.results), len(session.questions))
    return session
