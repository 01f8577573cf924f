from typing import Iterable, List, Optional

from songguess.models import SongGuess

GUESS_SLOTS = 10


def ordered_titles(guesses: Iterable, slots: int = GUESS_SLOTS) -> List[str]:
    """Return guess titles sorted by guessed_position, padded with "" to `slots`.

    Lists already longer than `slots` are returned whole.
    """
    titles = [g.song_title for g in sorted(guesses, key=lambda g: g.guessed_position)]
    while len(titles) < slots:
        titles.append('')
    return titles


def build_guesses(titles: List[Optional[str]]) -> List[SongGuess]:
    """Turn submitted titles into guesses ranked by submission order."""
    return [
        SongGuess(song_title='' if title is None else str(title), guessed_position=i + 1)
        for i, title in enumerate(titles)
    ]
