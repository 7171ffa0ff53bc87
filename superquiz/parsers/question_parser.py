"""Parse a question sheet (CSV export) into Question objects.

Column layout (0-indexed):
  0 Question | 1-4 Options A-D | 5 Answer (option text, not a letter)
  6 Hint | 7 Know More text | 8 Know More URL | 9 YouTube (unused)
  10 Image | 11 Type (unused) | 12 Concept (unused) | 13 Worksheet No
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from superquiz.models import ANSWER_LETTERS, Answer, Question
from superquiz.parsers.csv_line import iter_data_lines, parse_csv_line, parse_int

log = logging.getLogger("superquiz.parsers")

MIN_FIELDS = 6
DEFAULT_ANSWER = "A"


@dataclass
class ParseDiagnostics:
    """Counters a caller can pass in to spot badly authored sheets."""
    rows_seen: int = 0
    rows_short: int = 0
    rows_filtered: int = 0
    unmatched_answers: int = 0


def _column(parts: list[str], index: int) -> str:
    return parts[index] if index < len(parts) else ""


def resolve_answer_letter(options: list[str], answer_text: str) -> str | None:
    target = answer_text.strip().lower()
    for letter, option in zip(ANSWER_LETTERS, options):
        if option.strip().lower() == target:
            return letter
    return None


def parse_questions(
    csv_text: str,
    topic_id: str,
    filter_worksheet_number: int | None = None,
    diagnostics: ParseDiagnostics | None = None,
) -> list[Question]:
    if diagnostics is None:
        diagnostics = ParseDiagnostics()
    questions: list[Question] = []

    for i, line in iter_data_lines(csv_text):
        diagnostics.rows_seen += 1
        parts = parse_csv_line(line)
        if len(parts) < MIN_FIELDS:
            diagnostics.rows_short += 1
            continue

        worksheet_number = parse_int(_column(parts, 13))
        # Only filter when both sides are known
        if filter_worksheet_number is not None and worksheet_number is not None:
            if worksheet_number != filter_worksheet_number:
                diagnostics.rows_filtered += 1
                continue

        options = parts[1:5]
        letter = resolve_answer_letter(options, parts[5])
        if letter is None:
            diagnostics.unmatched_answers += 1
            log.warning(
                "%s line %d: answer %r matches no option, defaulting to %s",
                topic_id, i, parts[5], DEFAULT_ANSWER,
            )
            letter = DEFAULT_ANSWER

        questions.append(Question(
            id=f"{topic_id}-q{i}",
            text=parts[0],
            answers=[Answer(id=l, text=t) for l, t in zip(ANSWER_LETTERS, options)],
            correct_answer=letter,
            topic=topic_id,
            hint=_column(parts, 6) or None,
            know_more=_column(parts, 8) or None,
            know_more_text=_column(parts, 7) or None,
            image_url=_column(parts, 10) or None,
            worksheet_number=worksheet_number,
        ))

    return questions
