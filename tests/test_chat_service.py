import pytest

from famtree.services.chat_service import (
    INTERNAL_ERROR,
    QUERY_REQUIRED,
    ChatInputError,
    ChatInternalError,
    handle_query,
)
from famtree.services.response_formatter import NO_ANSWER


@pytest.fixture()
def user(make_user):
    return make_user("me@example.com")


@pytest.mark.parametrize("query", ["", "   ", None])
def test_empty_query_is_an_input_error(repo, user, query):
    with pytest.raises(ChatInputError) as exc:
        handle_query(repo, query, user.id)
    assert exc.value.message == QUERY_REQUIRED == "Query is required."
    assert exc.value.status_code == 400


def test_group_count(repo, user, make_user, make_group):
    other = make_user("other@example.com")
    make_group("Smiths", user)
    make_group("Joneses", other, members=[user])
    make_group("Not Mine", other)
    assert handle_query(repo, "how many groups am I in", user.id) == "You are a member of 2 family groups."


def test_group_count_singular(repo, user, make_group):
    make_group("Smiths", user)
    assert handle_query(repo, "How many family groups?", user.id) == "You are a member of 1 family group."


def test_group_list(repo, user, make_group):
    assert handle_query(repo, "what groups am I in", user.id) == "You are not a member of any family groups yet."
    make_group("Smiths", user)
    make_group("Joneses", user)
    assert handle_query(repo, "list my groups", user.id) == "You are in these groups: Smiths, Joneses."


def test_album_count_counts_personal_and_shared(repo, user, make_user, make_group, make_album):
    other = make_user("other@example.com")
    group = make_group("Smiths", other, members=[user])
    make_album("Mine", owner=user)
    make_album("Shared 1", owner=other, groups=[group])
    make_album("Shared 2", groups=[group])
    make_album("Private", owner=other)
    assert handle_query(repo, "how many albums do I have", user.id) == (
        "You have 1 personal album and are part of 2 group albums."
    )


def test_album_list_deduplicates(repo, user, make_group, make_album):
    assert handle_query(repo, "what albums do I have", user.id) == "You don't have any personal or group albums yet."
    group = make_group("Smiths", user)
    make_album("Beach", owner=user)
    make_album("Beach", groups=[group])
    make_album("Xmas", groups=[group])
    assert handle_query(repo, "what albums do I have", user.id) == "Your albums are: Beach, Xmas."


def test_album_description(repo, user, make_album):
    make_album("Summer Trip", owner=user, description="Beach vacation 2023")
    assert handle_query(repo, "what is Summer Trip about", user.id) == (
        'The album "Summer Trip" is about: Beach vacation 2023.'
    )


def test_group_album_description(repo, user, make_user, make_group, make_album):
    other = make_user("other@example.com")
    group = make_group("Smiths", other, members=[user])
    make_album("Reunion", owner=other, groups=[group])
    make_album("Secret", owner=other)
    assert handle_query(repo, "what is reunion about?", user.id) == (
        'The group album "Reunion" is about: No description provided.'
    )
    assert handle_query(repo, "what is Secret about", user.id) == 'I couldn\'t find an album named "Secret".'


def test_partner_scenario(repo, user, make_member):
    make_member("Rohith", user)
    assert handle_query(repo, "who is the partner of Rohith", user.id) == "Rohith has no partners listed."


def test_parents_plural_and_singular_agree(repo, user, make_member, link):
    alice = make_member("Alice", user)
    for name in ("Mom", "Dad"):
        link(make_member(name, user), alice)
    plural = handle_query(repo, "who are the parents of Alice", user.id)
    singular = handle_query(repo, "parent of alice", user.id)
    assert plural == singular == "Alice's parents are Mom and Dad."


def test_added_child_appears_exactly_once(repo, user, make_member, link):
    parent = make_member("Pat", user)
    link(parent, make_member("Kid", user))
    response = handle_query(repo, "who are the children of Pat", user.id)
    assert response == "Pat's child is Kid."
    assert response.count("Kid") == 1


def test_who_is(repo, user, make_member, link):
    ann = make_member("Ann", user)
    link(make_member("Bo", user), ann)
    link(ann, make_member("Dee", user), partner=True)
    assert handle_query(repo, "Who is Ann?", user.id) == (
        "Ann is a member of your family tree. Ann's parent is Bo. Ann's partner is Dee."
    )


def test_unauthorized_reads_like_nonexistent(repo, user, make_user, make_member):
    owner = make_user("owner@example.com")
    before = handle_query(repo, "who is the parent of Hidden", user.id)
    make_member("Hidden", owner)
    after = handle_query(repo, "who is the parent of Hidden", user.id)
    assert before == after == "I couldn't find anyone named Hidden in your family tree."
    assert handle_query(repo, "who is the parent of Hidden", owner.id) == "Hidden has no parents listed."


def test_unmatched_query(repo, user):
    assert handle_query(repo, "hello there", user.id) == NO_ANSWER


def test_data_access_failure_becomes_internal_error(repo, user, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("database exploded: secret detail")

    monkeypatch.setattr(repo, "find_groups_by_member", boom)
    with pytest.raises(ChatInternalError) as exc:
        handle_query(repo, "how many groups am I in", user.id)
    assert exc.value.message == INTERNAL_ERROR
    assert "secret" not in exc.value.message
    assert exc.value.status_code == 500


def test_non_ascii_names_match_exactly_as_stored(repo, user, make_member, make_album):
    make_member("Élodie", user)
    make_album("Été", owner=user, description="Vacances à la mer")
    assert handle_query(repo, "who is the partner of Élodie", user.id) == "Élodie has no partners listed."
    assert handle_query(repo, "what is Été about", user.id) == 'The album "Été" is about: Vacances à la mer.'


def test_non_string_query_is_an_input_error(repo, user):
    with pytest.raises(ChatInputError):
        handle_query(repo, 5, user.id)
