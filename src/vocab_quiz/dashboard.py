"""Grades, performance summaries, streaks and result display helpers."""
import random

from vocab_quiz.models import QuizPerformance, Streak
from vocab_quiz.quiz import _rng, calculate_score, round_half_up
from vocab_quiz.review import analyze_by_part_of_speech

GRADE_THRESHOLDS = (
    (95, "A+"),
    (90, "A"),
    (85, "A-"),
    (80, "B+"),
    (75, "B"),
    (70, "B-"),
    (65, "C+"),
    (60, "C"),
    (55, "C-"),
    (50, "D"),
)
FAILING_GRADE = "F"
GRADE_ORDER = tuple(grade for _, grade in GRADE_THRESHOLDS) + (FAILING_GRADE,)

ENCOURAGEMENTS = (
    "Sidaas ayey tahay! - That's right!",
    "Aad ayaad u fiican tahay! - You're very good!",
    "Hagaag! - Correct!",
    "Shaabash! - Well done!",
    "Ku sii wad! - Keep going!",
    "Fiican! - Good!",
    "Waa hagaag! - That's correct!",
)

CONSOLATIONS = (
    "Ma jirto dhibaato! - No problem!",
    "Isku day mar kale! - Try again!",
    "Waxbarasho ayay tahay! - It's learning!",
    "Ku sii wad! - Keep going!",
    "Markale ayaad heli doontaa! - You'll get it next time!",
    "Hagaag, baro! - That's okay, learn!",
    "Khalad kasta waa barashada! - Every mistake is learning!",
)

GRADE_EMOJI = {
    "A+": "🏆", "A": "⭐", "A-": "🌟",
    "B+": "👍", "B": "👌", "B-": "😊",
    "C+": "🙂", "C": "😐", "C-": "😕",
    "D": "😔", "F": "😞",
}


def get_grade(score: float) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return FAILING_GRADE


def analyze_performance(results: list, entries: list) -> QuizPerformance:
    """Summarize a finished session.

    Times come in as milliseconds; ``average_time`` is reported in whole
    seconds, rounded half up.
    """
    if not results:
        return QuizPerformance()

    total_time = sum(r.time_spent for r in results)
    accuracy = calculate_score(results)
    strengths, weaknesses = analyze_by_part_of_speech(results, entries)
    return QuizPerformance(
        total_questions=len(results),
        correct_answers=sum(1 for r in results if r.is_correct),
        accuracy=accuracy,
        total_time=total_time,
        average_time=round_half_up(total_time / len(results) / 1000),
        grade=get_grade(accuracy),
        strengths=strengths,
        weaknesses=weaknesses,
    )


def calculate_streak(results: list) -> Streak:
    """Current run ending at the last answer, plus the longest run of either kind."""
    if not results:
        return Streak()

    last = results[-1].is_correct
    current = 0
    for result in reversed(results):
        if result.is_correct != last:
            break
        current += 1

    longest = run = 0
    previous = None
    for result in results:
        run = run + 1 if result.is_correct == previous else 1
        previous = result.is_correct
        longest = max(longest, run)

    return Streak(current=current, longest=longest, kind="correct" if last else "incorrect")


def format_time(milliseconds: int) -> str:
    seconds = int(milliseconds // 1000)
    minutes, remaining = divmod(seconds, 60)
    if minutes > 0:
        return f"{minutes}m {remaining}s"
    return f"{remaining}s"


def format_time_display(seconds: int) -> str:
    minutes, remaining = divmod(int(seconds), 60)
    return f"{minutes:02d}:{remaining:02d}"


def get_performance_color(accuracy: float) -> str:
    if accuracy >= 90:
        return "#4CAF50"
    elif accuracy >= 80:
        return "#8BC34A"
    elif accuracy >= 70:
        return "#FFC107"
    elif accuracy >= 60:
        return "#FF9800"
    return "#F44336"


def get_performance_emoji(grade: str) -> str:
    return GRADE_EMOJI.get(grade, "📚")


def get_motivational_message(performance: QuizPerformance) -> str:
    accuracy = performance.accuracy
    if accuracy >= 95:
        return "Shabeelkan aad u fiican! Perfect score! - Excellent work!"
    elif accuracy >= 90:
        return "Aad ayaad u hagaagsan tahay! - You're doing great!"
    elif accuracy >= 80:
        return "Waxaad ku socotaa jid fiican! - You're on the right track!"
    elif accuracy >= 70:
        return "Hagaag, laakiin waxaad u baahan tahay in aad badan ka barto - Good, but you need more practice"
    elif accuracy >= 60:
        return "Ku sii wad! Waxbarasho badan ayaad u baahan tahay - Keep going! You need more study"
    return "Ha niyad jabin! Billow mar kale - Don't give up! Start again"


def get_random_encouragement(rng: random.Random = None) -> str:
    return (rng or _rng).choice(ENCOURAGEMENTS)


def get_random_consolation(rng: random.Random = None) -> str:
    return (rng or _rng).choice(CONSOLATIONS)
