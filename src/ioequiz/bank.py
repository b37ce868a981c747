import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
from pydantic import ValidationError

from .models import Question

logger = logging.getLogger(__name__)

LIST_SEPARATOR = "|"
REQUIRED_COLUMNS = {"id", "type", "question_text", "correct_answer"}

SAMPLE_QUESTIONS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "type": "multiple_choice",
        "question_text": "What is the capital of France?",
        "options": ["Paris", "London", "Rome", "Berlin"],
        "correct_answer": "Paris",
        "explanation": "Paris is the capital of France.",
    },
    {
        "id": 2,
        "type": "fill_in_blank",
        "question_text": "I ___ a student.",
        "correct_answer": "am",
        "explanation": "Use 'am' with 'I'.",
    },
    {
        "id": 3,
        "type": "rearrange",
        "question_text": "Put the words in order.",
        "rearrange_parts": ["school", "I", "to", "go"],
        "correct_answer": "I go to school",
        "explanation": "Subject, verb, then the place.",
    },
    {
        "id": 4,
        "type": "multiple_choice",
        "question_text": "Which one is an animal?",
        "options": ["table", "cat", "pen", "book"],
        "correct_answer": "cat",
        "explanation": "A cat is an animal.",
    },
    {
        "id": 5,
        "type": "fill_in_blank",
        "question_text": "She ___ (like) apples.",
        "correct_answer": "likes",
        "explanation": "Third person singular takes -s.",
    },
]


def _split(value: str) -> Optional[List[str]]:
    parts = [p.strip() for p in value.split(LIST_SEPARATOR) if p.strip()]
    return parts or None


def _row_to_record(row: Dict[str, str]) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "id": row["id"],
        "type": row["type"].strip(),
        "question_text": row["question_text"],
        "correct_answer": row["correct_answer"],
        "explanation": row.get("explanation", ""),
    }
    for key in ("options", "rearrange_parts"):
        record[key] = _split(row.get(key, ""))
    for key in ("image_url", "audio_url"):
        record[key] = row.get(key, "").strip() or None
    return record


class QuestionBank:
    """Loads the ordered question set once and serves it read-only."""

    def __init__(self, path: str):
        self.path = path
        self._questions: Tuple[Question, ...] = ()

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    def __len__(self) -> int:
        return len(self._questions)

    def load(self):
        records: List[Dict[str, Any]] = []
        if not os.path.exists(self.path):
            logger.warning(f"Question file {self.path} not found.")
        else:
            try:
                df = pd.read_csv(
                    self.path, encoding="utf-8", dtype=str, keep_default_na=False
                )
            except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
                logger.error(f"Failed to load {self.path}: {e}")
                df = None
            if df is not None:
                missing = REQUIRED_COLUMNS - set(df.columns)
                if missing:
                    logger.error(f"Skipping {self.path}: Missing columns {sorted(missing)}.")
                else:
                    records = [_row_to_record(row) for row in df.to_dict("records")]

        if not records:
            logger.warning("No questions loaded. Loading sample data.")
            records = SAMPLE_QUESTIONS

        self._questions = self._validate(records)
        logger.info(f"Loaded {len(self._questions)} questions from {self.path}")

    @staticmethod
    def _validate(records: List[Dict[str, Any]]) -> Tuple[Question, ...]:
        questions: List[Question] = []
        seen = set()
        for record in records:
            try:
                question = Question(**record)
            except ValidationError as e:
                logger.error(f"Skipping question {record.get('id')}: {e}")
                continue
            if question.id in seen:
                logger.error(f"Skipping duplicate question id {question.id}")
                continue
            seen.add(question.id)
            questions.append(question)
        return tuple(questions)
