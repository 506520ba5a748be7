from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Sequence, TypeVar

from santa_raffle.services.directory import Participant

T = TypeVar("T")

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK = 0x7FFFFFFF

DEFAULT_ROSTER: List[str] = [
    "ALVAREZ RUIZ ANA SOFIA",
    "BAKER THOMAS EDWARD",
    "CASTILLO MORA DIEGO",
    "DUBOIS CLAIRE MARIE",
    "ESPOSITO LUCA",
    "FISCHER HANNA",
    "GARCIA LOPEZ MARIANA",
    "HOLM ERIK",
    "IVANOVA DARIA",
    "JENSEN MADS",
    "KOWALSKI PIOTR",
    "LEROY CAMILLE",
    "MARTIN JULIEN",
    "NAKAMURA YUKI",
    "OKAFOR CHIDI",
    "PEREIRA JOAO PAULO",
    "QUINN SIOBHAN",
    "ROSSI GIULIA",
    "SANTOS BEATRIZ",
    "TANAKA HIROSHI",
    "UGARTE LEIRE",
    "VARGAS TORRES RAFAEL",
    "WEBER JONAS",
    "YILMAZ ELIF",
]


def seeded_random(seed: int) -> Callable[[], float]:
    state = seed

    def next_value() -> float:
        nonlocal state
        state = (state * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK
        return state / LCG_MASK

    return next_value


def shuffle_with_seed(items: Sequence[T], seed: int) -> List[T]:
    shuffled = list(items)
    random = seeded_random(seed)
    for i in range(len(shuffled) - 1, 0, -1):
        # random() reaches 1.0 when the state hits the mask
        j = min(int(random() * (i + 1)), i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def build_participants(names: Sequence[str], seed: int) -> List[Participant]:
    return [
        Participant(id=str(index + 1), name=name)
        for index, name in enumerate(shuffle_with_seed(names, seed))
    ]


def load_roster(path: Optional[str]) -> List[str]:
    if not path:
        return list(DEFAULT_ROSTER)
    names = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        name = line.strip()
        if name and not name.startswith("#"):
            names.append(name)
    return names
