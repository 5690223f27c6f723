from dataclasses import dataclass
from typing import Any

from .graph_resolver import MemberResult
from .intent_matcher import Intent, IntentKind, RelationKind

NO_ANSWER = "I'm sorry, I couldn't find an answer to that question. Please try rephrasing it."
NO_DESCRIPTION = "No description provided."

PLURALS = {
    RelationKind.PARENT: "parents",
    RelationKind.CHILD: "children",
    RelationKind.SIBLING: "siblings",
    RelationKind.PARTNER: "partners",
}


@dataclass(frozen=True)
class AlbumCounts:
    personal: int
    shared: int


@dataclass(frozen=True)
class AlbumDescription:
    name: str
    description: str | None
    shared: bool = False


def _s(count: int) -> str:
    return "" if count == 1 else "s"


def _unique(names: list[str]) -> list[str]:
    return list(dict.fromkeys(names))


def relation_sentence(name: str, relation: RelationKind, related: list[str]) -> str:
    """`Ann's parent is Bo.` / `Ann's parents are Bo and Cy.` / `Ann has no parents listed.`"""
    if not related:
        return f"{name} has no {PLURALS[relation]} listed."
    if len(related) == 1:
        return f"{name}'s {relation.value} is {related[0]}."
    return f"{name}'s {PLURALS[relation]} are {' and '.join(related)}."


def _person_sentence(result: MemberResult) -> str:
    parts = [f"{result.name} is a member of your family tree."]
    if result.parents:
        parts.append(relation_sentence(result.name, RelationKind.PARENT, result.parents))
    if result.partners:
        parts.append(relation_sentence(result.name, RelationKind.PARTNER, result.partners))
    return " ".join(parts)


def _album_description_sentence(intent: Intent, album: AlbumDescription | None) -> str:
    if album is None:
        return f"I couldn't find an album named \"{intent.name}\"."
    about = (album.description or "").strip() or NO_DESCRIPTION
    if not about.endswith((".", "!", "?")):
        about += "."
    label = "group album" if album.shared else "album"
    return f"The {label} \"{album.name}\" is about: {about}"


def format_response(intent: Intent | None, result: Any) -> str:
    """Render the answer for `intent`. `result` is whatever the lookup for that intent produced."""
    if intent is None:
        return NO_ANSWER

    if intent.kind == IntentKind.GROUP_COUNT:
        return f"You are a member of {result} family group{_s(result)}."

    if intent.kind == IntentKind.GROUP_LIST:
        names = _unique(result)
        if not names:
            return "You are not a member of any family groups yet."
        return f"You are in these groups: {', '.join(names)}."

    if intent.kind == IntentKind.ALBUM_COUNT:
        return (
            f"You have {result.personal} personal album{_s(result.personal)} "
            f"and are part of {result.shared} group album{_s(result.shared)}."
        )

    if intent.kind == IntentKind.ALBUM_LIST:
        names = _unique(result)
        if not names:
            return "You don't have any personal or group albums yet."
        return f"Your albums are: {', '.join(names)}."

    if intent.kind == IntentKind.ALBUM_DESCRIPTION:
        return _album_description_sentence(intent, result)

    # relationship and person lookups
    if result is None:
        return f"I couldn't find anyone named {intent.name} in your family tree."
    if intent.kind == IntentKind.RELATIONSHIP:
        return relation_sentence(result.name, intent.relation, result.related)
    return _person_sentence(result)
