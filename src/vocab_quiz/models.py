"""Data classes for the quiz domain model."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

SOURCE_TO_TARGET = "source-to-target"
TARGET_TO_SOURCE = "target-to-source"
AUDIO = "audio"
MIXED = "mixed"

QUESTION_DIRECTIONS = (SOURCE_TO_TARGET, TARGET_TO_SOURCE, AUDIO)
REQUEST_DIRECTIONS = QUESTION_DIRECTIONS + (MIXED,)

PARTS_OF_SPEECH = (
    "noun", "verb", "adjective", "adverb", "preposition", "pronoun", "conjunction",
)
DIFFICULTIES = ("beginner", "intermediate", "advanced")


@dataclass(frozen=True)
class WordExample:
    source: str
    target: str


@dataclass(frozen=True)
class VocabularyEntry:
    """One word pair. ``source`` is the Somali term, ``target`` the English one."""
    id: str
    source: str
    target: str
    category_id: str = ""
    part_of_speech: Optional[str] = None
    difficulty: Optional[str] = None
    phonetic: Optional[str] = None
    examples: tuple = ()


@dataclass(frozen=True)
class QuizQuestion:
    id: str
    entry_id: str
    question: str
    options: tuple
    correct_answer: str
    direction: str


@dataclass(frozen=True)
class QuizResult:
    question_id: str
    entry_id: str
    user_answer: str
    correct_answer: str
    is_correct: bool
    time_spent: int = 0  # ms


@dataclass
class QuizSession:
    id: str
    category_id: str
    questions: list
    results: list = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None
    score: int = 0


@dataclass
class QuizPerformance:
    total_questions: int = 0
    correct_answers: int = 0
    accuracy: int = 0
    total_time: int = 0  # ms
    average_time: int = 0  # seconds
    grade: str = "N/A"
    strengths: list = field(default_factory=list)
    weaknesses: list = field(default_factory=list)


@dataclass
class QuizConfig:
    question_count: int = 10
    time_per_question: int = 30  # seconds
    direction: str = MIXED
    difficulty: str = "medium"


@dataclass(frozen=True)
class Streak:
    current: int = 0
    longest: int = 0
    kind: str = "none"
