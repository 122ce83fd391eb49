import random

import pytest

from vocab_quiz.models import QuizResult, VocabularyEntry


@pytest.fixture
def rng():
    """Seeded random source so shuffles are reproducible."""
    return random.Random(1234)


@pytest.fixture
def entries():
    return [
        VocabularyEntry(id="w1", source="hooyo", target="mother", part_of_speech="noun", difficulty="beginner"),
        VocabularyEntry(id="w2", source="aabe", target="father", part_of_speech="noun", difficulty="beginner"),
        VocabularyEntry(id="w3", source="cun", target="eat", part_of_speech="verb", difficulty="intermediate"),
        VocabularyEntry(id="w4", source="cab", target="drink", part_of_speech="verb", difficulty="advanced"),
        VocabularyEntry(id="w5", source="weyn", target="big", part_of_speech="adjective", difficulty="beginner"),
        VocabularyEntry(id="w6", source="yar", target="small", part_of_speech="adjective"),
    ]


def _make_result(entry_id, is_correct, time_spent=1000, question_id=None):
    return QuizResult(
        question_id=question_id or f"q_{entry_id}",
        entry_id=entry_id,
        user_answer="x" if is_correct else "",
        correct_answer="x",
        is_correct=is_correct,
        time_spent=time_spent,
    )


@pytest.fixture
def make_result():
    """Build a QuizResult for an entry id."""
    return _make_result

