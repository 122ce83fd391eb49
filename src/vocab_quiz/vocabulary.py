"""Load vocabulary entries from JSON or CSV word lists."""
import csv
import json
import logging
from pathlib import Path

from vocab_quiz.models import VocabularyEntry, WordExample

logger = logging.getLogger(__name__)

CONTENT_DIR = Path(__file__).parent / "content"
SAMPLE_WORDS = CONTENT_DIR / "words.json"

# Import files use the mobile app's field names; both spellings are accepted
FIELD_ALIASES = {
    "source": ("source", "wordSo", "word_so"),
    "target": ("target", "wordEn", "word_en"),
    "category_id": ("category_id", "categoryId", "categoryName", "category"),
    "part_of_speech": ("part_of_speech", "partOfSpeech"),
    "difficulty": ("difficulty",),
    "phonetic": ("phonetic",),
}


def _field(row: dict, name: str):
    for key in FIELD_ALIASES[name]:
        value = row.get(key)
        if value:
            return value.strip() if isinstance(value, str) else value
    return None


def _examples(raw) -> tuple:
    if not raw:
        return ()
    if isinstance(raw, str):
        raw = json.loads(raw)
    return tuple(
        WordExample(source=ex.get("so") or ex.get("source", ""),
                    target=ex.get("en") or ex.get("target", ""))
        for ex in raw
    )


def entry_from_row(row: dict, index: int) -> VocabularyEntry | None:
    """Build an entry from one import row, or None when a term is missing."""
    source = _field(row, "source")
    target = _field(row, "target")
    if not source or not target:
        logger.warning("Skipping row %d: both terms are required", index)
        return None
    return VocabularyEntry(
        id=str(row.get("id") or f"w{index}"),
        source=source,
        target=target,
        category_id=_field(row, "category_id") or "",
        part_of_speech=_field(row, "part_of_speech"),
        difficulty=_field(row, "difficulty"),
        phonetic=_field(row, "phonetic"),
        examples=_examples(row.get("examples")),
    )


def read_rows(file_path) -> list[dict]:
    path = Path(file_path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, dict):
            if "words" not in data:
                raise ValueError(f"{path.name} has no \"words\" list")
            return data["words"]
        return data
    elif suffix == ".csv":
        with path.open(newline="", encoding="utf-8") as f:
            return list(csv.DictReader(f))
    raise ValueError(f"Unsupported vocabulary file type: {suffix or path.name}")


def load_entries(file_path) -> list[VocabularyEntry]:
    rows = read_rows(file_path)
    entries = [e for e in (entry_from_row(row, i) for i, row in enumerate(rows, 1)) if e]
    logger.info("Loaded %d of %d words from %s", len(entries), len(rows), Path(file_path).name)
    return entries


def load_sample_entries() -> list[VocabularyEntry]:
    return load_entries(SAMPLE_WORDS)


def get_categories(entries: list) -> list[str]:
    """Distinct category ids in first-seen order."""
    return list(dict.fromkeys(e.category_id for e in entries if e.category_id))


def filter_by_category(entries: list, category_id: str) -> list:
    return [e for e in entries if e.category_id == category_id]
