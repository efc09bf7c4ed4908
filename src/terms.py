"""Russian kinship vocabulary: one lookup for every sexed word."""

from models import FEMALE, MALE

RELATION_NOT_FOUND = "Связь не найдена"

MATERNAL_LINE = "по материнской линии"
PATERNAL_LINE = "по отцовской линии"

# concept -> (male, female, neutral)
TERMS = {
    "parent": ("отец", "мать", "родитель"),
    "child": ("сын", "дочь", "ребёнок"),
    "grandparent": ("дед", "бабушка", "дед/бабушка"),
    "grandchild": ("внук", "внучка", "внук/внучка"),
    "great_grandparent": ("прадед", "прабабушка", "прадед/прабабушка"),
    "great_grandchild": ("правнук", "правнучка", "правнук/правнучка"),
    "sibling": ("брат", "сестра", "брат/сестра"),
    "aunt_uncle": ("дядя", "тётя", "дядя/тётя"),
    "niece_nephew": ("племянник", "племянница", "племянник/племянница"),
}

# Stems take the adjective endings below: двоюродн + ый -> двоюродный
COUSIN_STEMS = {
    1: "двоюродн",
    2: "троюродн",
    3: "четвероюродн",
    4: "пятиюродн",
}

ANCESTOR_TERMS = {1: "parent", 2: "grandparent", 3: "great_grandparent"}
DESCENDANT_TERMS = {1: "child", 2: "grandchild", 3: "great_grandchild"}


def word(concept: str, sex: str) -> str:
    male, female, neutral = TERMS[concept]
    if sex == FEMALE:
        return female
    if sex == MALE:
        return male
    return neutral


def cousin_stem(degree: int) -> str:
    """Degree prefix stem: 1 -> «двоюродн», 2 -> «троюродн», 7 -> «7-юродн»."""
    if degree <= 0:
        return ""
    return COUSIN_STEMS.get(degree, f"{degree}-юродн")


def prefixed(stem: str, concept: str, sex: str) -> str:
    """Inflect the degree adjective together with its noun.

    Unknown sex gives both forms, e.g. «двоюродный брат/двоюродная сестра».
    """
    male, female, _ = TERMS[concept]
    if sex == MALE:
        return f"{stem}ый {male}"
    if sex == FEMALE:
        return f"{stem}ая {female}"
    return f"{stem}ый {male}/{stem}ая {female}"


def ancestor_term(generations: int, sex: str) -> str:
    if generations in ANCESTOR_TERMS:
        return word(ANCESTOR_TERMS[generations], sex)
    return f"предок в {generations}-м колене"


def descendant_term(generations: int, sex: str) -> str:
    if generations in DESCENDANT_TERMS:
        return word(DESCENDANT_TERMS[generations], sex)
    return f"потомок в {generations}-м колене"


def grand_aunt_uncle_term(degree: int, sex: str) -> str:
    """Sibling of a grandparent (degree 2) or great-grandparent (degree 3)."""
    if degree in (2, 3):
        return prefixed(cousin_stem(degree - 1), "grandparent", sex)
    return f"предок (удаление {degree - 1})"


def grand_niece_nephew_term(degree: int, sex: str) -> str:
    if degree in (2, 3):
        return prefixed(cousin_stem(degree - 1), "grandchild", sex)
    return f"потомок (удаление {degree - 1})"


def line_of(sex: str) -> str:
    """Line annotation for the nearest parent on a path, '' when unknown."""
    if sex == FEMALE:
        return MATERNAL_LINE
    if sex == MALE:
        return PATERNAL_LINE
    return ""


def with_line(term: str, line: str) -> str:
    return f"{term} ({line})" if line else term
