"""Weak area identification, study advice and adaptive question selection."""
import logging
import random

from vocab_quiz.config import settings
from vocab_quiz.models import MIXED
from vocab_quiz.quiz import generate_questions

logger = logging.getLogger(__name__)

UNKNOWN_PART_OF_SPEECH = "unknown"

PART_OF_SPEECH_LABELS = {
    "noun": "Magacyada - Nouns",
    "verb": "Ficillada - Verbs",
    "adjective": "Tilmaanta - Adjectives",
    "adverb": "Xaaladaha - Adverbs",
    "preposition": "Jarrada - Prepositions",
    "pronoun": "Badalyada - Pronouns",
    "conjunction": "Xiriiriyaha - Conjunctions",
}


def get_part_of_speech_label(pos: str) -> str:
    return PART_OF_SPEECH_LABELS.get(pos, pos)


def get_part_of_speech_stats(results: list, entries: list) -> dict:
    """Correct/total counts per part of speech, in first-seen order."""
    by_id = {entry.id: entry for entry in entries}
    stats = {}
    for result in results:
        entry = by_id.get(result.entry_id)
        pos = (entry.part_of_speech if entry else None) or UNKNOWN_PART_OF_SPEECH
        bucket = stats.setdefault(pos, {"correct": 0, "total": 0})
        bucket["total"] += 1
        if result.is_correct:
            bucket["correct"] += 1
    return stats


def analyze_by_part_of_speech(results: list, entries: list) -> tuple[list[str], list[str]]:
    """Split parts of speech into strengths and weaknesses.

    Buckets with fewer than ``settings.MIN_SAMPLES`` answers are left out of
    both lists.
    """
    strengths, weaknesses = [], []
    for pos, counts in get_part_of_speech_stats(results, entries).items():
        if counts["total"] < settings.MIN_SAMPLES:
            continue
        accuracy = counts["correct"] / counts["total"]
        label = f"{get_part_of_speech_label(pos)} ({counts['correct']}/{counts['total']})"
        if accuracy >= settings.STRENGTH_ACCURACY:
            strengths.append(label)
        elif accuracy < settings.WEAKNESS_ACCURACY:
            weaknesses.append(label)
    return strengths, weaknesses


def get_study_recommendations(results: list, entries: list) -> list[str]:
    recommendations = []
    incorrect = [r for r in results if not r.is_correct]
    if not incorrect:
        recommendations.append("Excellent work! Try a more challenging category.")
        return recommendations

    slow = [r for r in results if r.time_spent > settings.SLOW_ANSWER_MS]
    if len(slow) > len(results) * settings.SLOW_ANSWER_RATIO:
        recommendations.append("Practice with flashcards to improve recognition speed")

    if len(incorrect) > len(results) * settings.INCORRECT_RATIO:
        recommendations.append("Review the vocabulary words in this category")
        recommendations.append("Use the pronunciation feature to learn correct sounds")

    _, weaknesses = analyze_by_part_of_speech(results, entries)
    if weaknesses:
        recommendations.append(f"Focus on: {', '.join(weaknesses)}")

    return recommendations


def generate_study_plan(results: list, category: str, weekly_goal: int = 3) -> list[str]:
    accuracy = (sum(1 for r in results if r.is_correct) / len(results) * 100) if results else 0.0

    if accuracy < 50:
        return [
            f"Dedicate 15-20 minutes daily to {category} vocabulary",
            "Review flashcards 3 times per day",
            "Listen to pronunciations 5-10 times per word",
            "Write each word 5 times to memorize spelling",
        ]
    elif accuracy < 70:
        return [
            f"Study {category} words for 10-15 minutes daily",
            "Review incorrect answers from this quiz",
            "Take a quiz every 2-3 days",
            "Use words in example sentences",
        ]
    elif accuracy < 90:
        return [
            "Quick 5-10 minute daily reviews",
            f"Take quizzes {weekly_goal} times per week",
            "Focus on speed and accuracy",
            "Try more challenging categories",
        ]
    return [
        "Excellent! Maintain with light review",
        "Challenge yourself with advanced categories",
        "Help others or teach what you've learned",
        "Weekly review to maintain knowledge",
    ]


def recommend_difficulty(performances: list) -> str:
    """Pick easy/medium/hard from recent accuracy and answer speed (seconds)."""
    if not performances:
        return "easy"
    avg_accuracy = sum(p.accuracy for p in performances) / len(performances)
    avg_time = sum(p.average_time for p in performances) / len(performances)
    if avg_accuracy >= 90 and avg_time <= 8:
        return "hard"
    elif avg_accuracy >= 75 and avg_time <= 12:
        return "medium"
    return "easy"


def build_adaptive_pool(entries: list, previous_results: list, question_count: int) -> list:
    """Missed, advanced and untagged entries first, then the rest, in input order."""
    missed = {r.entry_id for r in previous_results if not r.is_correct}
    priority = [
        e for e in entries
        if e.id in missed or not e.difficulty or e.difficulty == "advanced"
    ]
    taken = {e.id for e in priority}
    pool = list(priority)
    for entry in entries:
        if len(pool) >= question_count:
            break
        if entry.id not in taken:
            pool.append(entry)
    logger.debug("Adaptive pool: %d priority of %d entries (%d missed)",
                 len(priority), len(entries), len(missed))
    return pool[:question_count]


def generate_adaptive_questions(entries: list, previous_results: list,
                                question_count: int = 10, direction: str = MIXED,
                                rng: random.Random = None) -> list:
    pool = build_adaptive_pool(entries, previous_results, question_count)
    return generate_questions(pool, question_count, direction, rng)
