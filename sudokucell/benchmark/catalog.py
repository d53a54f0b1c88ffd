"""Named puzzles used by the benchmark and the test-suite."""

from __future__ import annotations
from typing import Dict, List, Optional

from ..io.puzzle import Puzzle, parse_puzzle

# name -> puzzle text
PUZZLES: Dict[str, str] = {
    "empty-4x4": "0" * 16,
    "first-row-4x4": "1234" + "0" * 12,
    # Every cell keeps two or more candidates, yet 1 is forced into (3, 2)
    "dead-end-4x4": "0000000110000020",
    "empty-9x9": "0" * 81,
    "classic": (
        "530070000"
        "600195000"
        "098000060"
        "800060003"
        "400803001"
        "700020006"
        "060000280"
        "000419005"
        "000080079"
    ),
    "euler-01": (
        "003020600"
        "900305001"
        "001806400"
        "008102900"
        "700000008"
        "006708200"
        "002609500"
        "800203009"
        "005010300"
    ),
    "minimal-17": (
        "000000010"
        "400000000"
        "020000000"
        "000050407"
        "008000300"
        "001090000"
        "300400200"
        "050100000"
        "000806000"
    ),
    "row-conflict": (
        "550070000"
        "600195000"
        "098000060"
        "800060003"
        "400803001"
        "700020006"
        "060000280"
        "000419005"
        "000080079"
    ),
}

# name -> expected grid, for puzzles with a unique solution
SOLUTIONS: Dict[str, str] = {
    "classic": (
        "534678912"
        "672195348"
        "198342567"
        "859761423"
        "426853791"
        "713924856"
        "961537284"
        "287419635"
        "345286179"
    ),
    "euler-01": (
        "483921657"
        "967345821"
        "251876493"
        "548132976"
        "729564138"
        "136798245"
        "372689514"
        "814253769"
        "695417382"
    ),
    "minimal-17": (
        "693784512"
        "487512936"
        "125963874"
        "932651487"
        "568247391"
        "741398625"
        "319475268"
        "856129743"
        "274836159"
    ),
}

UNSOLVABLE = frozenset({"dead-end-4x4", "row-conflict"})


def get_puzzle(name: str) -> Puzzle:
    """Look up a catalog puzzle by name."""
    try:
        text = PUZZLES[name]
    except KeyError:
        raise KeyError(f"Unknown puzzle {name!r}, choose from {sorted(PUZZLES)}") from None
    return parse_puzzle(text, name=name)


def load_catalog(names: Optional[List[str]] = None) -> Dict[str, Puzzle]:
    """Parse the named catalog puzzles (all of them by default)."""
    return {name: get_puzzle(name) for name in (names or list(PUZZLES))}
