"""
Family assistant: answers free-text questions about the requesting user's
groups, albums and family tree.

classify -> look up (read-only) -> format. Each call re-reads the database;
nothing is kept between queries.
"""
import logging
from typing import Any, Callable

from .family_repository import AlbumScope, FamilyRepository
from .graph_resolver import resolve
from .intent_matcher import Intent, IntentKind, classify
from .response_formatter import AlbumCounts, AlbumDescription, format_response

logger = logging.getLogger(__name__)

QUERY_REQUIRED = "Query is required."
INTERNAL_ERROR = "An internal error occurred while processing your request."


class ChatError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ChatInputError(ChatError):
    status_code = 400


class ChatInternalError(ChatError):
    status_code = 500


def _group_ids(repo: FamilyRepository, user_id: str) -> list[str]:
    return [g.id for g in repo.find_groups_by_member(user_id)]


def _count_groups(repo: FamilyRepository, intent: Intent, user_id: str) -> int:
    return len(repo.find_groups_by_member(user_id))


def _list_groups(repo: FamilyRepository, intent: Intent, user_id: str) -> list[str]:
    return [g.name for g in repo.find_groups_by_member(user_id)]


def _count_albums(repo: FamilyRepository, intent: Intent, user_id: str) -> AlbumCounts:
    personal = repo.count_albums_by_owner(user_id)
    shared = repo.count_albums_by_shared_groups(_group_ids(repo, user_id))
    return AlbumCounts(personal=personal, shared=shared)


def _list_albums(repo: FamilyRepository, intent: Intent, user_id: str) -> list[str]:
    personal = repo.find_albums_by_owner(user_id)
    shared = repo.find_albums_by_shared_groups(_group_ids(repo, user_id))
    return [a.name for a in personal] + [a.name for a in shared]


def _describe_album(repo: FamilyRepository, intent: Intent, user_id: str) -> AlbumDescription | None:
    # personal albums win over group albums of the same name
    album = repo.find_album_by_name_case_insensitive(AlbumScope(owner_id=user_id), intent.name)
    if album:
        return AlbumDescription(name=album.name, description=album.description)
    group_ids = _group_ids(repo, user_id)
    album = repo.find_album_by_name_case_insensitive(AlbumScope(group_ids=group_ids), intent.name)
    if album:
        return AlbumDescription(name=album.name, description=album.description, shared=True)
    return None


def _resolve_member(repo: FamilyRepository, intent: Intent, user_id: str):
    return resolve(repo, intent.name, intent.relation, user_id)


LOOKUPS: dict[IntentKind, Callable[[FamilyRepository, Intent, str], Any]] = {
    IntentKind.GROUP_COUNT: _count_groups,
    IntentKind.GROUP_LIST: _list_groups,
    IntentKind.ALBUM_COUNT: _count_albums,
    IntentKind.ALBUM_LIST: _list_albums,
    IntentKind.ALBUM_DESCRIPTION: _describe_album,
    IntentKind.RELATIONSHIP: _resolve_member,
    IntentKind.PERSON: _resolve_member,
}


def answer(repo: FamilyRepository, query: str, user_id: str) -> str:
    intent = classify(query)
    if intent is None:
        logger.info(f"No intent matched for user {user_id}")
        return format_response(None, None)
    logger.debug(f"Query classified as {intent.kind} (name={intent.name!r}, relation={intent.relation})")
    result = LOOKUPS[intent.kind](repo, intent, user_id)
    return format_response(intent, result)


def handle_query(repo: FamilyRepository, raw_query: Any, user_id: str) -> str:
    """
    Entry point for the chat endpoint.

    Raises ChatInputError for a missing, blank or non-string query and ChatInternalError
    for anything that goes wrong while reading data. The internal error
    carries no detail from the original exception.
    """
    if not isinstance(raw_query, str) or not raw_query.strip():
        raise ChatInputError(QUERY_REQUIRED)

    try:
        return answer(repo, raw_query, user_id)
    except Exception as e:
        logger.error(f"Chat query failed for user {user_id}: {str(e)}", exc_info=True)
        raise ChatInternalError(INTERNAL_ERROR) from e
