# tests/test_dashboard.py
import random

import pytest

from vocab_quiz.dashboard import (
    GRADE_ORDER, analyze_performance, calculate_streak, format_time,
    format_time_display, get_grade, get_motivational_message,
    get_performance_color, get_performance_emoji, get_random_consolation,
    get_random_encouragement, CONSOLATIONS, ENCOURAGEMENTS,
)
from vocab_quiz.models import QuizPerformance


@pytest.mark.parametrize("score,grade", [
    (100, "A+"), (95, "A+"), (94, "A"), (90, "A"), (85, "A-"), (80, "B+"),
    (75, "B"), (70, "B-"), (65, "C+"), (60, "C"), (55, "C-"), (50, "D"),
    (49, "F"), (0, "F"),
])
def test_get_grade(score, grade):
    assert get_grade(score) == grade


def test_grade_monotonic():
    """A higher percentage never earns a worse grade."""
    rank = {grade: i for i, grade in enumerate(GRADE_ORDER)}
    for high in range(101):
        for low in range(high):
            assert rank[get_grade(high)] <= rank[get_grade(low)]


def test_analyze_performance_empty():
    perf = analyze_performance([], [])
    assert perf.total_questions == 0
    assert perf.correct_answers == 0
    assert perf.accuracy == 0
    assert perf.total_time == 0
    assert perf.average_time == 0
    assert perf.grade == "N/A"
    assert perf.strengths == []
    assert perf.weaknesses == []


def test_analyze_performance_times(entries, make_result):
    results = [
        make_result(e.id, True, t)
        for e, t in zip(entries, [3000, 4000, 2000, 5000, 1000])
    ]
    perf = analyze_performance(results, entries)
    assert perf.total_time == 15000
    assert perf.average_time == 3
    assert perf.accuracy == 100
    assert perf.grade == "A+"


def test_analyze_performance_average_rounds_half_up(entries, make_result):
    results = [make_result("w1", True, 2000), make_result("w2", False, 3000)]
    assert analyze_performance(results, entries).average_time == 3


def test_analyze_performance_counts(entries, make_result):
    results = [
        make_result("w1", True), make_result("w2", True),
        make_result("w3", False), make_result("w4", False),
    ]
    perf = analyze_performance(results, entries)
    assert perf.total_questions == 4
    assert perf.correct_answers == 2
    assert perf.accuracy == 50
    assert perf.grade == "D"
    assert perf.strengths == ["Magacyada - Nouns (2/2)"]
    assert perf.weaknesses == ["Ficillada - Verbs (0/2)"]


def test_streak_empty():
    streak = calculate_streak([])
    assert (streak.current, streak.longest, streak.kind) == (0, 0, "none")


def test_streak_current_and_longest(make_result):
    outcomes = [True, True, True, False, True, True]
    streak = calculate_streak([make_result(str(i), ok) for i, ok in enumerate(outcomes)])
    assert streak.current == 2
    assert streak.longest == 3
    assert streak.kind == "correct"


def test_streak_incorrect_run(make_result):
    outcomes = [True, False, False, False, False]
    streak = calculate_streak([make_result(str(i), ok) for i, ok in enumerate(outcomes)])
    assert streak.current == 4
    assert streak.longest == 4
    assert streak.kind == "incorrect"


def test_streak_single_result(make_result):
    streak = calculate_streak([make_result("a", False)])
    assert (streak.current, streak.longest, streak.kind) == (1, 1, "incorrect")


@pytest.mark.parametrize("ms,text", [
    (0, "0s"), (999, "0s"), (42000, "42s"), (60000, "1m 0s"), (65500, "1m 5s"),
])
def test_format_time(ms, text):
    assert format_time(ms) == text


def test_format_time_display():
    assert format_time_display(0) == "00:00"
    assert format_time_display(75) == "01:15"
    assert format_time_display(600) == "10:00"


def test_performance_color_bands():
    assert get_performance_color(95) == "#4CAF50"
    assert get_performance_color(80) == "#8BC34A"
    assert get_performance_color(70) == "#FFC107"
    assert get_performance_color(60) == "#FF9800"
    assert get_performance_color(59) == "#F44336"


def test_performance_emoji():
    assert get_performance_emoji("A+") == "🏆"
    assert get_performance_emoji("F") == "😞"
    assert get_performance_emoji("N/A") == "📚"


def test_motivational_message_bands():
    assert "Perfect score" in get_motivational_message(QuizPerformance(accuracy=95))
    assert "doing great" in get_motivational_message(QuizPerformance(accuracy=90))
    assert "right track" in get_motivational_message(QuizPerformance(accuracy=80))
    assert "more practice" in get_motivational_message(QuizPerformance(accuracy=70))
    assert "more study" in get_motivational_message(QuizPerformance(accuracy=60))
    assert "Don't give up" in get_motivational_message(QuizPerformance(accuracy=10))


def test_random_messages_use_given_rng():
    assert get_random_encouragement(random.Random(3)) in ENCOURAGEMENTS
    assert get_random_consolation(random.Random(3)) in CONSOLATIONS
    assert get_random_encouragement(random.Random(3)) == get_random_encouragement(random.Random(3))


def test_random_messages_default_to_shared_generator(monkeypatch):
    monkeypatch.setattr("vocab_quiz.dashboard._rng", random.Random(3))
    expected = random.Random(3).choice(ENCOURAGEMENTS)
    assert get_random_encouragement() == expected
