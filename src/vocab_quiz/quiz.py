"""Quiz engine: question generation, answer checking and scoring."""
import logging
import math
import random

from vocab_quiz.config import settings
from vocab_quiz.models import (
    MIXED, QUESTION_DIRECTIONS, SOURCE_TO_TARGET, TARGET_TO_SOURCE,
    QuizConfig, QuizQuestion, VocabularyEntry,
)

logger = logging.getLogger(__name__)

MIN_ENTRIES = 4
DISTRACTOR_COUNT = 3

_rng = random.Random()


class InsufficientDataError(ValueError):
    """Raised when the vocabulary pool is too small to build a question."""


def normalize_answer(text: str) -> str:
    return text.strip().lower()


def validate_answer(submitted: str, expected: str) -> bool:
    return normalize_answer(submitted) == normalize_answer(expected)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_score(results: list) -> int:
    """Percentage of correct results, rounded half up. 0 for no results."""
    if not results:
        return 0
    correct = sum(1 for r in results if r.is_correct)
    return round_half_up(correct * 100 / len(results))


def validate_config(config: QuizConfig, available_entries: int) -> bool:
    if config.question_count < 1:
        return False
    if config.question_count > available_entries:
        return False
    if not (settings.MIN_TIME_PER_QUESTION <= config.time_per_question
            <= settings.MAX_TIME_PER_QUESTION):
        return False
    return True


def shuffled(items, rng: random.Random = None) -> list:
    """Return a uniformly shuffled copy of ``items``."""
    rng = rng or _rng
    result = list(items)
    rng.shuffle(result)
    return result


def pick_direction(rng: random.Random = None, weights=None) -> str:
    """Draw a question direction from a cumulative (direction, weight) table."""
    rng = rng or _rng
    table = weights or settings.DIRECTION_WEIGHTS
    total = sum(weight for _, weight in table)
    point = rng.random() * total
    cumulative = 0.0
    for direction, weight in table:
        cumulative += weight
        if point < cumulative:
            return direction
    return table[-1][0]


def _answer_term(entry: VocabularyEntry, direction: str) -> str:
    if direction == SOURCE_TO_TARGET:
        return entry.target
    return entry.source


def _question_text(entry: VocabularyEntry, direction: str) -> str:
    if direction == SOURCE_TO_TARGET:
        return f'What is the {settings.TARGET_LANGUAGE} translation of "{entry.source}"?'
    if direction == TARGET_TO_SOURCE:
        return f'What is the {settings.SOURCE_LANGUAGE} translation of "{entry.target}"?'
    return "Listen to the pronunciation and select the correct word:"


def pick_distractors(entries: list, entry: VocabularyEntry, direction: str,
                     rng: random.Random = None) -> list:
    """Choose wrong answers from the whole pool, never repeating an option."""
    seen = {normalize_answer(_answer_term(entry, direction))}
    distractors = []
    for candidate in shuffled(entries, rng):
        if candidate.id == entry.id:
            continue
        term = _answer_term(candidate, direction)
        key = normalize_answer(term)
        if key in seen:
            continue
        seen.add(key)
        distractors.append(term)
        if len(distractors) == DISTRACTOR_COUNT:
            return distractors
    raise InsufficientDataError(
        f"Only {len(distractors)} distinct wrong answers available for {entry.id!r}"
    )


def generate_questions(entries: list, question_count: int = 10,
                       direction: str = MIXED, rng: random.Random = None) -> list:
    """Build multiple-choice questions from a vocabulary pool.

    Args:
        entries: Pool of VocabularyEntry objects; also the distractor source.
        question_count: Upper bound on questions; capped at ``len(entries)``.
        direction: One of the question directions, or "mixed" to draw each
            question's direction from the weighted table in settings.
        rng: Random source; defaults to the module-wide generator.

    Returns:
        List of QuizQuestion with ids q_1, q_2, ...
    """
    if len(entries) < MIN_ENTRIES:
        raise InsufficientDataError(
            f"Need at least {MIN_ENTRIES} words to generate quiz questions, got {len(entries)}"
        )
    if direction != MIXED and direction not in QUESTION_DIRECTIONS:
        raise ValueError(f"Unknown question direction: {direction!r}")
    rng = rng or _rng

    selected = shuffled(entries, rng)[:max(question_count, 0)]
    questions = []
    for index, entry in enumerate(selected, 1):
        kind = pick_direction(rng) if direction == MIXED else direction
        correct = _answer_term(entry, kind)
        wrong = pick_distractors(entries, entry, kind, rng)
        questions.append(QuizQuestion(
            id=f"q_{index}",
            entry_id=entry.id,
            question=_question_text(entry, kind),
            options=tuple(shuffled([correct] + wrong, rng)),
            correct_answer=correct,
            direction=kind,
        ))
    logger.debug("Generated %d questions (%s) from %d entries",
                 len(questions), direction, len(entries))
    return questions

