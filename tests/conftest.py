"""Shared builders for kinship tests."""

import pytest

from models import FEMALE, MALE, UNKNOWN, IdGenerator, ParentEdge, Person


class GraphBuilder:
    """Small helper to lay out persons and parent links by name."""

    def __init__(self):
        self.ids = IdGenerator()
        self.persons: list[Person] = []
        self.edges: list[ParentEdge] = []
        self.by_name: dict[str, str] = {}

    def add(self, name: str, sex: str = UNKNOWN) -> str:
        p = Person(id=self.ids(), name=name, sex=sex)
        self.persons.append(p)
        self.by_name[name] = p.id
        return p.id

    def link(self, parent: str, child: str) -> None:
        self.edges.append(ParentEdge(self.by_name[parent], self.by_name[child]))

    def __getitem__(self, name: str) -> str:
        return self.by_name[name]


@pytest.fixture
def builder():
    return GraphBuilder()


@pytest.fixture
def nuclear_family(builder):
    """Father and mother with a son and a daughter."""
    builder.add("Отец", MALE)
    builder.add("Мать", FEMALE)
    builder.add("Сын", MALE)
    builder.add("Дочь", FEMALE)
    for parent in ("Отец", "Мать"):
        for child in ("Сын", "Дочь"):
            builder.link(parent, child)
    return builder


@pytest.fixture
def extended_family(builder):
    """
    Four generations under one couple:

        Прадед + Прабабушка
        ├── Дед ── Отец ── Сын ── Внук
        └── Тётя ── Кузина ── Дочь кузины ── Внучка кузины
    """
    builder.add("Прадед", MALE)
    builder.add("Прабабушка", FEMALE)
    builder.add("Дед", MALE)
    builder.add("Тётя", FEMALE)
    builder.add("Отец", MALE)
    builder.add("Кузина", FEMALE)
    builder.add("Сын", MALE)
    builder.add("Дочь кузины", FEMALE)
    builder.add("Внук", MALE)
    builder.add("Внучка кузины", FEMALE)
    builder.add("Безымянный", UNKNOWN)

    for parent in ("Прадед", "Прабабушка"):
        builder.link(parent, "Дед")
        builder.link(parent, "Тётя")
    builder.link("Дед", "Отец")
    builder.link("Отец", "Сын")
    builder.link("Сын", "Внук")
    builder.link("Тётя", "Кузина")
    builder.link("Кузина", "Дочь кузины")
    builder.link("Дочь кузины", "Внучка кузины")
    builder.link("Тётя", "Безымянный")
    return builder
