from famtree.services.graph_resolver import MemberResult
from famtree.services.intent_matcher import Intent, IntentKind, RelationKind
from famtree.services.response_formatter import (
    NO_ANSWER,
    AlbumCounts,
    AlbumDescription,
    format_response,
    relation_sentence,
)

GROUP_COUNT = Intent(kind=IntentKind.GROUP_COUNT)


def test_group_count_pluralization():
    assert format_response(GROUP_COUNT, 1) == "You are a member of 1 family group."
    assert format_response(GROUP_COUNT, 2) == "You are a member of 2 family groups."
    assert format_response(GROUP_COUNT, 0) == "You are a member of 0 family groups."


def test_group_list_deduplicates_names():
    intent = Intent(kind=IntentKind.GROUP_LIST)
    assert format_response(intent, ["Smiths", "Joneses", "Smiths"]) == "You are in these groups: Smiths, Joneses."
    assert format_response(intent, []) == "You are not a member of any family groups yet."


def test_album_count():
    intent = Intent(kind=IntentKind.ALBUM_COUNT)
    assert format_response(intent, AlbumCounts(personal=1, shared=3)) == (
        "You have 1 personal album and are part of 3 group albums."
    )


def test_album_list():
    intent = Intent(kind=IntentKind.ALBUM_LIST)
    assert format_response(intent, ["Beach", "Beach", "Xmas"]) == "Your albums are: Beach, Xmas."
    assert format_response(intent, []) == "You don't have any personal or group albums yet."


def test_album_description():
    intent = Intent(kind=IntentKind.ALBUM_DESCRIPTION, name="summer trip")
    album = AlbumDescription(name="Summer Trip", description="Beach vacation 2023")
    assert format_response(intent, album) == 'The album "Summer Trip" is about: Beach vacation 2023.'

    shared = AlbumDescription(name="Reunion", description=None, shared=True)
    assert format_response(intent, shared) == 'The group album "Reunion" is about: No description provided.'

    assert format_response(intent, None) == 'I couldn\'t find an album named "summer trip".'


def test_relation_sentences_join_with_and():
    assert relation_sentence("Ann", RelationKind.PARENT, ["Bo"]) == "Ann's parent is Bo."
    assert relation_sentence("Ann", RelationKind.PARENT, ["Bo", "Cy", "Di"]) == "Ann's parents are Bo and Cy and Di."
    assert relation_sentence("Ann", RelationKind.CHILD, ["Ed", "Flo"]) == "Ann's children are Ed and Flo."
    assert relation_sentence("Rohith", RelationKind.PARTNER, []) == "Rohith has no partners listed."


def test_person_lookup_sentence():
    intent = Intent(kind=IntentKind.PERSON, name="ann")
    bare = MemberResult(name="Ann")
    assert format_response(intent, bare) == "Ann is a member of your family tree."

    full = MemberResult(name="Ann", parents=["Bo", "Cy"], partners=["Dee"])
    assert format_response(intent, full) == (
        "Ann is a member of your family tree. Ann's parents are Bo and Cy. Ann's partner is Dee."
    )


def test_not_found_uses_the_asked_name():
    intent = Intent(kind=IntentKind.RELATIONSHIP, name="zed", relation=RelationKind.PARENT)
    assert format_response(intent, None) == "I couldn't find anyone named zed in your family tree."


def test_no_intent():
    assert format_response(None, None) == NO_ANSWER
