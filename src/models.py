"""Data classes for kinship graph entities."""

from dataclasses import dataclass

MALE = "male"
FEMALE = "female"
UNKNOWN = "unknown"
SEXES = (MALE, FEMALE, UNKNOWN)


@dataclass
class Person:
    id: str
    name: str
    sex: str = UNKNOWN  # male | female | unknown
    note: str | None = None


@dataclass(frozen=True)
class ParentEdge:
    parent_id: str
    child_id: str


def normalize_sex(value) -> str:
    """Map anything outside the known sexes to 'unknown'."""
    return value if value in SEXES else UNKNOWN


class IdGenerator:
    """Monotonic string id source, owned by whoever creates persons."""

    def __init__(self, start: int = 1):
        self._next = start

    def __call__(self) -> str:
        value = str(self._next)
        self._next += 1
        return value

    def peek(self) -> int:
        return self._next

    def reset(self, start: int = 1) -> None:
        self._next = start

    def ensure_above(self, ids) -> None:
        """Advance past every numeric id in `ids` so new ids never collide."""
        # isdigit() also accepts superscripts such as "²", which int() rejects
        numeric = [int(i) for i in ids if str(i).isdecimal()]
        if numeric:
            self._next = max(self._next, max(numeric) + 1)
