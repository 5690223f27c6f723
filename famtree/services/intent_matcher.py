"""
Rule-based intent matching for the family assistant.

A query is tested against an ordered list of (predicate, builder) rules.
The first predicate that matches decides the intent; later rules are never
evaluated. Ordering matters: "parents of" must be tried before "parent of"
and "children of" before "child of".
"""
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Optional


class IntentKind(StrEnum):
    GROUP_COUNT = "group_count"
    GROUP_LIST = "group_list"
    ALBUM_COUNT = "album_count"
    ALBUM_LIST = "album_list"
    ALBUM_DESCRIPTION = "album_description"
    RELATIONSHIP = "relationship"
    PERSON = "person"


class RelationKind(StrEnum):
    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"
    PARTNER = "partner"


@dataclass(frozen=True)
class Intent:
    kind: IntentKind
    name: str | None = None
    relation: RelationKind | None = None


GROUP_KEYWORDS = re.compile(r"\b(group|groups|family|families)\b")
ALBUM_KEYWORDS = re.compile(r"\b(album|albums|photo|photos|picture|pictures)\b")
GROUP_LIST_PHRASES = re.compile(r"\bwhat (groups|families)\b|\blist my (groups|families)\b")
ALBUM_LIST_PHRASES = re.compile(r"\bwhat (albums|photos|pictures)\b")
ALBUM_ABOUT = re.compile(r"\bwhat is (?P<name>.+?)\s+about\b", re.IGNORECASE)

# Tried top to bottom; longer phrases precede the shorter ones they contain.
RELATION_PHRASES: list[tuple[str, RelationKind | None]] = [
    ("parents of", RelationKind.PARENT),
    ("parent of", RelationKind.PARENT),
    ("brother of", RelationKind.SIBLING),
    ("sister of", RelationKind.SIBLING),
    ("partner of", RelationKind.PARTNER),
    ("children of", RelationKind.CHILD),
    ("child of", RelationKind.CHILD),
    ("siblings of", RelationKind.SIBLING),
    ("who is", None),
]

# Capitalized question words, greetings and filler that never name people
NON_NAME_WORDS = {
    "I", "Who", "What", "Whom", "Whose", "Where", "When", "Why", "How", "Is", "Are",
    "Tell", "Show", "Find", "Do", "Does", "Can", "Please", "My", "The", "A", "An",
    "Hello", "Hi", "Hey", "Thanks", "Thank", "Ok", "Okay", "Yes", "No", "Good", "Morning",
}
PROPER_NOUN_RUN = re.compile(r"\b[A-Z][\w'-]*(?:\s+[A-Z][\w'-]*)*")

Rule = tuple[Callable[[str, str], bool], Callable[[str, str], Optional[Intent]]]


def _clean_name(raw: str) -> str:
    """Trim whitespace and trailing sentence punctuation from an extracted name."""
    return raw.strip().rstrip("?!.").strip().strip("\"'").strip()


def _split_after(text: str, phrase: str) -> str:
    # case-insensitive split on the original text so names keep their casing
    parts = re.split(re.escape(phrase), text, maxsplit=1, flags=re.IGNORECASE)
    return parts[1] if len(parts) > 1 else ""


def extract_proper_noun(text: str) -> str:
    """Best-effort person name detection: the first run of capitalized words
    that is not a question word."""
    for match in PROPER_NOUN_RUN.finditer(text):
        words = match.group(0).split()
        while words and words[0] in NON_NAME_WORDS:
            words.pop(0)
        if words:
            return " ".join(words)
    return ""


def _relation_rule(phrase: str, relation: RelationKind | None) -> Rule:
    def predicate(lowered: str, original: str) -> bool:
        return phrase in lowered

    def build(lowered: str, original: str) -> Optional[Intent]:
        name = _clean_name(_split_after(original, phrase))
        if not name:
            return None
        kind = IntentKind.RELATIONSHIP if relation else IntentKind.PERSON
        return Intent(kind=kind, name=name, relation=relation)

    return predicate, build


def _album_about(lowered: str, original: str) -> Optional[Intent]:
    match = ALBUM_ABOUT.search(original)
    name = _clean_name(match.group("name")) if match else ""
    if not name:
        return None
    return Intent(kind=IntentKind.ALBUM_DESCRIPTION, name=name)


def _person_fallback(lowered: str, original: str) -> Optional[Intent]:
    name = extract_proper_noun(original)
    if not name:
        return None
    return Intent(kind=IntentKind.PERSON, name=name)


RULES: list[Rule] = [
    (
        lambda q, _: bool(GROUP_KEYWORDS.search(q)) and "how many" in q,
        lambda q, _: Intent(kind=IntentKind.GROUP_COUNT),
    ),
    (
        lambda q, _: bool(GROUP_KEYWORDS.search(q)) and bool(GROUP_LIST_PHRASES.search(q)),
        lambda q, _: Intent(kind=IntentKind.GROUP_LIST),
    ),
    (
        lambda q, _: bool(ALBUM_KEYWORDS.search(q)) and "how many" in q,
        lambda q, _: Intent(kind=IntentKind.ALBUM_COUNT),
    ),
    (
        lambda q, _: bool(ALBUM_KEYWORDS.search(q)) and bool(ALBUM_LIST_PHRASES.search(q)),
        lambda q, _: Intent(kind=IntentKind.ALBUM_LIST),
    ),
    (lambda q, _: bool(ALBUM_ABOUT.search(q)), _album_about),
    *[_relation_rule(phrase, relation) for phrase, relation in RELATION_PHRASES],
    (lambda q, _: True, _person_fallback),
]


def classify(query: str) -> Intent | None:
    """
    Classify a free-text question. Returns None when no rule applies or the
    winning rule could not extract a name.

    Matching is done on the lower-cased query; extracted names are sliced
    from the original text so "Alice" stays "Alice".
    """
    lowered = query.lower()
    for predicate, build in RULES:
        if predicate(lowered, query):
            # first match wins, even when it yields nothing
            return build(lowered, query)
    return None
