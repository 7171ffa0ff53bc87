"""Free-text answer grading for the spelling and word-meaning games.

Both graders are pure: they take the user's text and the canonical record and
return a Feedback. Score and streak bookkeeping is the caller's job (see
superquiz.scoring).
"""
from __future__ import annotations

import random
import re

from superquiz.models import CLOSE, CORRECT, INCORRECT, PARTIAL, Feedback, MeaningWord
from superquiz.similarity import similarity

# Similarity above this counts as a near miss
CLOSE_THRESHOLD = 0.7

FULL_CREDIT = 0.4
PARTIAL_CREDIT = 0.2
PARTIAL_MIN_TOKENS = 3

CORRECT_MESSAGES = [
    "🎉 Awesome! Perfect spelling!",
    "⭐ Wonderful! You nailed it!",
    "🌟 Brilliant! Keep it up!",
    "🏆 Amazing! You're a star!",
    "✨ Fantastic! Well done!",
    "🎊 Super! That's correct!",
]
CLOSE_MESSAGE = "So close! Check your spelling carefully."
LEARN_MESSAGE = "Let's learn this word!"
MEANING_CORRECT_MESSAGE = "Excellent! You understood the meaning!"
MEANING_PARTIAL_MESSAGE = "You're on the right track!"

_PUNCTUATION = re.compile(r"[.,!?'\"]")


def tokenize_answer(text: str) -> list[str]:
    """Words longer than two characters, punctuation stripped."""
    return [w for w in _PUNCTUATION.sub("", text).split() if len(w) > 2]


def tokenize_meaning(meaning: str) -> list[str]:
    return [w for w in meaning.lower().split() if len(w) > 3]


def grade_spelling(user_text: str, canonical_word: str, rng: random.Random | None = None) -> Feedback:
    answer = user_text.strip().lower()
    expected = canonical_word.strip().lower()

    if answer == expected:
        rng = rng or random
        return Feedback(CORRECT, rng.choice(CORRECT_MESSAGES), correct_answer=canonical_word)
    if similarity(answer, expected) > CLOSE_THRESHOLD:
        return Feedback(CLOSE, CLOSE_MESSAGE, correct_answer=canonical_word, user_answer=answer)
    return Feedback(INCORRECT, LEARN_MESSAGE, correct_answer=canonical_word)


def grade_meaning(user_text: str, word: MeaningWord) -> Feedback:
    """Grade a free-text explanation of ``word``.

    Signals, all substring based:
      keywords  - listed keywords found in the answer
      synonyms  - any listed synonym found in the answer (full credit alone)
      overlap   - words of the canonical meaning that contain, or are
                  contained in, a word of the answer
    """
    answer = user_text.strip().lower()
    user_tokens = tokenize_answer(answer)

    keyword_matches = [kw for kw in word.keywords if kw.lower() in answer]
    synonym_match = any(syn.lower() in answer for syn in word.synonyms)

    meaning_tokens = tokenize_meaning(word.meaning)
    overlap = [
        mw for mw in meaning_tokens
        if any(uw in mw or mw in uw for uw in user_tokens)
    ]

    keyword_score = len(keyword_matches) / max(len(word.keywords), 1)
    overlap_score = len(overlap) / max(len(meaning_tokens), 1)

    if synonym_match or keyword_score >= FULL_CREDIT or overlap_score >= FULL_CREDIT:
        return Feedback(
            CORRECT, MEANING_CORRECT_MESSAGE,
            correct_meaning=word.meaning,
            matched_concepts=keyword_matches + overlap,
        )
    if (
        keyword_score >= PARTIAL_CREDIT
        or overlap_score >= PARTIAL_CREDIT
        or len(user_tokens) >= PARTIAL_MIN_TOKENS
    ):
        return Feedback(
            PARTIAL, MEANING_PARTIAL_MESSAGE,
            correct_meaning=word.meaning,
            matched_concepts=keyword_matches + overlap,
        )
    return Feedback(INCORRECT, LEARN_MESSAGE, correct_meaning=word.meaning)
