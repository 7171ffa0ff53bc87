"""Built-in content used when a sheet is not configured or cannot be loaded."""
from __future__ import annotations

from superquiz.models import Answer, MeaningWord, Question, SpellWord, Topic


def _answers(*texts: str) -> list[Answer]:
    return [Answer(id=letter, text=t) for letter, t in zip("ABCD", texts)]


# Sheet URLs stay as placeholders until the master config supplies real links.
SHEET_URLS = {
    "space": "PLACEHOLDER_SPACE_SHEET_URL",
    "geography": "PLACEHOLDER_GEOGRAPHY_SHEET_URL",
    "math": "PLACEHOLDER_MATH_SHEET_URL",
    "spell": "PLACEHOLDER_SPELL_CHECK_SHEET_URL",
}

TOPICS = [
    Topic("space", "Theme", "🚀", "#4dd0e1", "Easy", 10, SHEET_URLS["space"], worksheet_number=1),
    Topic("geography", "English", "🌍", "#66bb6a", "Medium", 8, SHEET_URLS["geography"], worksheet_number=2),
    Topic("math", "Math", "🔢", "#ffa726", "Hard", 12, SHEET_URLS["math"], worksheet_number=3),
    Topic("spell", "Spell Check", "✏️", "#ab47bc", "Medium", 7, SHEET_URLS["spell"], worksheet_number=4),
]


def get_topic(topic_id: str) -> Topic | None:
    return next((t for t in TOPICS if t.id == topic_id), None)


def get_sample_questions(topic_id: str) -> list[Question]:
    samples = {
        "space": [
            Question(
                id="space-q1",
                text="Who took Lily and Max on their space trip?",
                note="Read the story carefully before answering.",
                answers=_answers("Captain Star", "Emma", "Jake", "Columbus"),
                correct_answer="A",
                topic="space",
            ),
            Question(
                id="space-q2",
                text="What planet is known as the Red Planet?",
                answers=_answers("Venus", "Mars", "Jupiter", "Saturn"),
                correct_answer="B",
                topic="space",
            ),
        ],
        "geography": [
            Question(
                id="geography-q1",
                text="What is the capital of France?",
                answers=_answers("London", "Berlin", "Paris", "Madrid"),
                correct_answer="C",
                topic="geography",
            ),
        ],
        "math": [
            Question(
                id="math-q1",
                text="What is 12 + 8?",
                answers=_answers("18", "20", "22", "24"),
                correct_answer="B",
                topic="math",
            ),
        ],
        "spell": [
            Question(
                id="spell-q1",
                text="Which word is spelled correctly?",
                note="Look carefully at each spelling before choosing.",
                answers=_answers("Beatiful", "Beautiful", "Beutiful", "Beautifull"),
                correct_answer="B",
                topic="spell",
            ),
        ],
    }
    return samples.get(topic_id, [])


SPELL_WORDS = [
    SpellWord(1, "elephant", "easy", "Animals", "Large grey animal with a long trunk", "ele____t"),
    SpellWord(2, "beautiful", "medium", "Adjectives", "Very pretty or attractive", "beau____ul"),
    SpellWord(3, "butterfly", "easy", "Animals", "Colorful insect with wings", "butt____ly"),
    SpellWord(4, "chocolate", "easy", "Food", "Sweet brown candy", "choc____te"),
    SpellWord(5, "favourite", "medium", "Adjectives", "The one you like the most", "favo____te"),
    SpellWord(6, "knowledge", "hard", "Nouns", "What you learn and know", "know____ge"),
    SpellWord(7, "difficult", "medium", "Adjectives", "Not easy to do", "diffi____t"),
    SpellWord(8, "adventure", "medium", "Nouns", "An exciting journey", "adven____e"),
    SpellWord(9, "important", "medium", "Adjectives", "Something that matters a lot", "impo____nt"),
    SpellWord(10, "wonderful", "easy", "Adjectives", "Amazing and great", "wond____ul"),
]

MEANING_WORDS = [
    MeaningWord(
        1, "Happy", "feeling joy or pleasure",
        ["joy", "pleasure", "good", "smile", "glad"],
        ["joyful", "glad", "cheerful", "delighted"],
        "I am happy to see you!", "easy",
    ),
    MeaningWord(
        2, "Brave", "not afraid of danger",
        ["courage", "fear", "strong", "bold", "danger"],
        ["courageous", "fearless", "bold", "valiant"],
        "The brave firefighter saved the cat.", "easy",
    ),
    MeaningWord(
        3, "Curious", "wanting to know or learn something",
        ["know", "learn", "question", "wonder", "interested"],
        ["inquisitive", "interested", "eager"],
        "The curious child asked many questions.", "medium",
    ),
    MeaningWord(
        4, "Enormous", "very large in size",
        ["big", "large", "huge", "giant", "size"],
        ["huge", "massive", "gigantic", "immense"],
        "The elephant was enormous!", "easy",
    ),
    MeaningWord(
        5, "Generous", "willing to give and share with others",
        ["give", "share", "kind", "help", "others"],
        ["kind", "giving", "charitable", "unselfish"],
        "She was generous with her toys.", "medium",
    ),
    MeaningWord(
        6, "Ancient", "belonging to a very long time ago",
        ["old", "history", "past", "long", "ago"],
        ["old", "historic", "antique", "aged"],
        "We visited an ancient temple.", "medium",
    ),
    MeaningWord(
        7, "Peaceful", "calm and quiet without worry",
        ["calm", "quiet", "relax", "gentle", "still"],
        ["calm", "tranquil", "serene", "quiet"],
        "The garden was peaceful.", "easy",
    ),
    MeaningWord(
        8, "Magnificent", "extremely beautiful or impressive",
        ["beautiful", "amazing", "wonderful", "great", "impressive"],
        ["splendid", "grand", "majestic", "glorious"],
        "The palace was magnificent!", "hard",
    ),
]


def get_spell_word(word_id: int) -> SpellWord | None:
    return next((w for w in SPELL_WORDS if w.id == word_id), None)


def get_meaning_word(word_id: int) -> MeaningWord | None:
    return next((w for w in MEANING_WORDS if w.id == word_id), None)
