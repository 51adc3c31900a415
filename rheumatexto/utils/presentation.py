"""
Presentation Helpers

Turns engine events and ranks into what the client displays: severity bands,
proximity messages, meter position and the share text.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from ..config.game_settings import MAX_RANK
from ..models.game import GameEvent, Guess, GuessAccepted, GuessRejected, HintExhausted, RejectionReason


class RankBand(Enum):
    """
    Five fixed severity bands, hottest first:
    (name, upper bound, color, emoji, joint diagram class).

    The cold band leaves the diagram uninflamed.
    """
    HOT = ("hot", 10, "var(--accent-red)", "🟥", "inflamed-1")
    WARM = ("warm", 100, "var(--accent-orange)", "🟧", "inflamed-2")
    MILD = ("mild", 500, "var(--accent-yellow)", "🟨", "inflamed-3")
    COOL = ("cool", 1000, "var(--accent-blue)", "🟦", "inflamed-4")
    COLD = ("cold", None, "var(--accent-cold)", "⬜", None)

    def __init__(self, label: str, upper: Optional[int], color: str, emoji: str,
                 diagram_state: Optional[str]):
        self.label = label
        self.upper = upper
        self.color = color
        self.emoji = emoji
        self.diagram_state = diagram_state

    @property
    def css_class(self) -> str:
        return f"rank-{self.label}"


def rank_band(rank: int) -> RankBand:
    for band in RankBand:
        if band.upper is None or rank <= band.upper:
            return band
    return RankBand.COLD


_PROXIMITY_MESSAGES = [
    (1, "🎉 DIAGNOSIS COMPLETE!"),
    (5, "🔥 ON FIRE! Almost there!"),
    (10, "🔥 Flaring! So close!"),
    (20, "😰 You're close! Keep going!"),
    (50, "🌡️ Getting warmer!"),
    (100, "👀 Interesting... think related!"),
    (300, "🤔 Lukewarm... try another angle"),
    (500, "😐 Meh... keep thinking"),
    (1000, "❄️ Getting cold..."),
]
_COLDEST_MESSAGE = "🥶 Ice cold! Try something medical"

_REJECTION_MESSAGES = {
    RejectionReason.DUPLICATE_GUESS: "Already guessed!",
    RejectionReason.UNKNOWN_WORD: "Word not recognized",
    RejectionReason.NO_HINT_AVAILABLE: "No hint available",
    RejectionReason.GAME_OVER: "Game is already over",
    RejectionReason.GAME_NOT_STARTED: "No game in progress",
}
HINT_EXHAUSTED_MESSAGE = "No hints remaining!"


def proximity_message(rank: int) -> str:
    for limit, message in _PROXIMITY_MESSAGES:
        if rank <= limit:
            return message
    return _COLDEST_MESSAGE


def meter_position(rank: int) -> float:
    """Percentage along the proximity meter; lower rank sits further right."""
    return max(0.0, min(100.0, (1 - rank / MAX_RANK) * 100))


def rejection_message(reason: RejectionReason) -> str:
    return _REJECTION_MESSAGES[reason]


def render_event(event: GameEvent, hard_mode: bool = False) -> Dict[str, Any]:
    """
    Event payload for the client. Hard mode drops the proximity message
    but keeps the rank.
    """
    data = event.to_dict()

    if isinstance(event, GuessAccepted):
        band = rank_band(event.rank)
        data['band'] = band.label
        data['color'] = band.color
        data['meter_position'] = meter_position(event.rank)
        data['diagram_state'] = band.diagram_state
        data['message'] = None if hard_mode else proximity_message(event.rank)
        if event.is_hint:
            data['notice'] = f'💡 Hint: "{event.word.upper()}"'
        elif event.was_corrected:
            data['notice'] = f'"{event.original}" → "{event.word}"'
    elif isinstance(event, GuessRejected):
        data['message'] = rejection_message(event.reason)
    elif isinstance(event, HintExhausted):
        data['message'] = HINT_EXHAUSTED_MESSAGE

    return data


def guess_to_dict(guess: Guess) -> Dict[str, Any]:
    band = rank_band(guess.rank)
    return {
        'word': guess.word,
        'rank': guess.rank,
        'is_hint': guess.is_hint,
        'band': band.label,
        'css_class': band.css_class,
    }


def sorted_history(guesses: Iterable[Guess]) -> List[Dict[str, Any]]:
    """Guess history ordered best rank first, as the history list shows it."""
    return [guess_to_dict(guess) for guess in sorted(guesses, key=lambda g: g.rank)]


def guess_visualization(guesses: List[Guess], limit: int = 20) -> List[str]:
    """Band colors of the most recent guesses, oldest first, for the win screen."""
    return [rank_band(guess.rank).color for guess in guesses[-limit:]]


def share_text(target: str, guesses: List[Guess], url: Optional[str] = None) -> str:
    blocks = ''.join(rank_band(guess.rank).emoji for guess in guesses[-10:])
    lines = [
        "Rheumatexto 🔬",
        f"Found: {target.upper()}",
        f"Guesses: {len(guesses)}",
        blocks,
    ]
    text = '\n'.join(lines)
    if url:
        text += f"\n\nPlay at: {url}"
    return text
