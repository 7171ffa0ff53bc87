"""Fill-in-the-blank patterns for the spelling game."""
from __future__ import annotations

BLANK = "_"


def generate_fill_in_blank(word: str) -> str:
    """Mask the middle of ``word``, keeping more letters visible on longer words.

    up to 4 letters:  first + blanks + last      (``c__t``)
    up to 7 letters:  first two + blanks + last  (``pl___t``)
    longer:           first three + blanks + last two (``ele___nt``)
    """
    n = len(word)
    if n < 2:
        return word
    if n <= 4:
        return word[0] + BLANK * (n - 2) + word[-1]
    if n <= 7:
        return word[:2] + BLANK * (n - 3) + word[-1]
    return word[:3] + BLANK * (n - 5) + word[-2:]
