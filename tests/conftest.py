"""Shared test fixtures."""
from __future__ import annotations

import pytest

from superquiz.models import MeaningWord, Topic


@pytest.fixture
def question_csv():
    """A question sheet export: header, three worksheets, one short row."""
    return """\
Question,Option 1,Option 2,Option 3,Option 4,Answer,Hint,Know More,Link,YouTube,Image,Type,Concept,Worksheet No
What planet is known as the Red Planet?,Venus,Mars,Jupiter,Saturn,Mars,Think of rust,Mars looks red because of iron oxide,https://example.org/mars,,https://example.org/mars.png,MCQ,Planets,1
"Which is largest, by far?",Moon,"Sun, our star",Earth,Mars,"sun, our star",,,,,,MCQ,Stars,1

What is 2 + 2?,3,4,5,6,4,,,,,,MCQ,Sums,2
too,short,row
"""


@pytest.fixture
def master_csv():
    """A master config export with topic and leaderboard columns."""
    return """\
Topic,Link,Worksheet No,Tab Name,Difficulty,Leaderboard Name,Quizzes,Stars,Streaks
Theme,https://docs.google.com/spreadsheets/d/abc123/edit,5,Space,Easy,Asha,12,40,3
English,TBA,2,English,Medium,Ravi,7,n/a,2
Math,TBA,3,Math,Hard,,9,9,9
Spell Check,TBA,4,Spell,Medium
"""


@pytest.fixture
def happy_word():
    return MeaningWord(
        1, "Happy", "feeling joy or pleasure",
        ["joy", "pleasure", "good", "smile", "glad"],
        ["joyful", "glad", "cheerful", "delighted"],
        "I am happy to see you!", "easy",
    )


@pytest.fixture
def live_topic():
    return Topic(
        "space", "Theme", "🚀", "#4dd0e1", "Easy", 10,
        "https://docs.google.com/spreadsheets/d/e/XYZ/pub?output=csv",
        worksheet_number=1,
    )
