"""
Word Data Loader

Reads the ranking dataset (target words, per-target rankings and the common
word list) from JSON and validates it before any game can start.
"""

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Optional, Tuple


class DatasetLoadFailure(Exception):
    """The ranking dataset could not be read or is malformed."""


@dataclass(frozen=True)
class WordData:
    """Immutable, shared view of the ranking dataset."""
    target_words: Tuple[str, ...]
    word_rankings: Mapping[str, Mapping[str, int]]
    common_words: FrozenSet[str]

    def rankings_for(self, target: str) -> Mapping[str, int]:
        return self.word_rankings.get(target, MappingProxyType({}))

    def ranking_lookups(self, target: str) -> Iterator[Tuple[str, Mapping[str, int]]]:
        """
        Ordered lookup strategies: the active target's table first, then
        every target's table in target-word order.
        """
        yield target, self.rankings_for(target)
        for other in self.target_words:
            yield other, self.word_rankings[other]

    def find_ranked(self, word: str, target: str) -> Optional[Tuple[str, int]]:
        """Return (table owner, rank) for the first table that ranks word."""
        for owner, rankings in self.ranking_lookups(target):
            if word in rankings:
                return owner, rankings[word]
        return None

    def is_common(self, word: str) -> bool:
        return word in self.common_words

    def statistics(self) -> Dict[str, Any]:
        """Summary counts used by the health endpoint."""
        sizes = [len(self.word_rankings[t]) for t in self.target_words]
        return {
            'target_words': len(self.target_words),
            'common_words': len(self.common_words),
            'ranked_words': sum(sizes),
            'avg_rankings_per_target': round(sum(sizes) / len(sizes), 2) if sizes else 0,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WordData':
        """
        Build and validate a WordData from the parsed JSON document.

        Raises:
            DatasetLoadFailure: If a required key is missing or the rankings
                break the rank-1-is-the-target rule
        """
        if not isinstance(data, dict):
            raise DatasetLoadFailure("Dataset must be a JSON object")

        for key in ('targetWords', 'wordRankings', 'commonWords'):
            if key not in data:
                raise DatasetLoadFailure(f"Dataset is missing '{key}'")

        target_words = tuple(word.strip().lower() for word in data['targetWords'])
        if not target_words:
            raise DatasetLoadFailure("Target word list cannot be empty")

        raw_rankings = {
            target.strip().lower(): table for target, table in data['wordRankings'].items()
        }

        rankings: Dict[str, Mapping[str, int]] = {}
        for target in target_words:
            if target not in raw_rankings:
                raise DatasetLoadFailure(f"No rankings for target word '{target}'")

            table: Dict[str, int] = {}
            for word, rank in raw_rankings[target].items():
                if isinstance(rank, bool) or not isinstance(rank, int) or rank < 1:
                    raise DatasetLoadFailure(
                        f"Rank for '{word}' under '{target}' must be a positive integer"
                    )
                table[word.strip().lower()] = rank

            if table.get(target) != 1:
                raise DatasetLoadFailure(f"Target word '{target}' must rank 1 in its own table")
            top = [word for word, rank in table.items() if rank == 1]
            if len(top) != 1:
                raise DatasetLoadFailure(f"Rank 1 under '{target}' is shared by {top}")

            rankings[target] = MappingProxyType(table)

        common_words = frozenset(word.strip().lower() for word in data['commonWords'])

        return cls(
            target_words=target_words,
            word_rankings=MappingProxyType(rankings),
            common_words=common_words,
        )


def load_word_data(json_file_path: str) -> WordData:
    """
    Load the ranking dataset from a JSON file.

    Args:
        json_file_path: Path to a file shaped like
            {"targetWords": [...], "wordRankings": {...}, "commonWords": [...]}

    Returns:
        WordData: Validated, read-only dataset

    Raises:
        DatasetLoadFailure: If the file is missing, is not valid JSON or
            fails validation
    """
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DatasetLoadFailure(f"Word data file not found: {json_file_path}") from e
    except json.JSONDecodeError as e:
        raise DatasetLoadFailure(f"Invalid JSON in {json_file_path}: {e}") from e
    except OSError as e:
        raise DatasetLoadFailure(f"Could not read {json_file_path}: {e}") from e

    try:
        return WordData.from_dict(data)
    except (AttributeError, TypeError) as e:
        raise DatasetLoadFailure(f"Malformed word data in {json_file_path}: {e}") from e
