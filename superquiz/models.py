from __future__ import annotations

from dataclasses import asdict, dataclass, field

from superquiz.parsers.csv_line import parse_int
from superquiz.words import generate_fill_in_blank

# Feedback verdicts
CORRECT = "correct"
CLOSE = "close"
PARTIAL = "partial"
INCORRECT = "incorrect"

ANSWER_LETTERS = ("A", "B", "C", "D")

UNCONFIGURED_LINKS = {"", "TBA"}


@dataclass
class Answer:
    id: str  # A-D
    text: str


@dataclass
class Question:
    id: str
    text: str
    answers: list[Answer]
    correct_answer: str
    topic: str
    hint: str | None = None
    know_more: str | None = None  # URL
    know_more_text: str | None = None
    image_url: str | None = None
    note: str | None = None
    worksheet_number: int | None = None

    def correct_text(self) -> str:
        return next(a.text for a in self.answers if a.id == self.correct_answer)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Topic:
    id: str
    name: str
    icon: str
    color: str
    difficulty: str
    total: int
    sheet_url: str
    worksheet_number: int | None = None
    worksheet_gid: str | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.sheet_url.startswith("PLACEHOLDER_")


@dataclass
class TopicConfig:
    topic: str
    link: str
    worksheet_no: str
    tab_name: str
    difficulty: str

    @property
    def is_configured(self) -> bool:
        return self.link not in UNCONFIGURED_LINKS and not self.link.startswith("PLACEHOLDER_")

    @property
    def worksheet_number(self) -> int | None:
        return parse_int(self.worksheet_no)


@dataclass
class LeaderboardEntry:
    name: str
    quizzes: int = 0
    stars: int = 0
    streaks: int = 0


@dataclass
class SpellWord:
    id: int
    word: str
    difficulty: str  # easy | medium | hard
    category: str
    hint: str
    fill_in_blank: str = ""

    @property
    def pattern(self) -> str:
        if self.fill_in_blank:
            return self.fill_in_blank
        return generate_fill_in_blank(self.word)


@dataclass
class MeaningWord:
    id: int
    word: str
    meaning: str
    keywords: list[str]
    synonyms: list[str]
    example: str
    difficulty: str


@dataclass
class Feedback:
    verdict: str  # correct | close | partial | incorrect
    message: str
    correct_answer: str | None = None
    correct_meaning: str | None = None
    user_answer: str | None = None
    matched_concepts: list[str] = field(default_factory=list)

    @property
    def is_correct(self) -> bool:
        return self.verdict == CORRECT

    def to_dict(self) -> dict:
        return asdict(self)
