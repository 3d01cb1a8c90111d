"""
Query Resolver - directory search

A query is answered from the loaded profiles when any name matches;
otherwise it is escalated to the archive summarizer in the user's language.
"""
import logging
from typing import Iterable, List

from models.domain.dossier import Profile, SearchResult
from services.localization import resolve_language
from services.summarizer import Summarizer

logger = logging.getLogger(__name__)


def match_names(query: str, profiles: Iterable[Profile]) -> List[Profile]:
    """Profiles whose name contains the query (case-insensitive)"""
    needle = query.strip().lower()
    return [p for p in profiles if needle in p.name.lower()]


def filter_profiles(query: str, profiles: Iterable[Profile]) -> List[Profile]:
    """
    Browse filter: match on name, category label, or stored category.

    A blank query keeps every profile.
    """
    needle = (query or "").strip().lower()
    profiles = list(profiles)
    if not needle:
        return profiles
    return [
        p for p in profiles
        if needle in p.name.lower()
        or needle in (p.category_label or "").lower()
        or needle in p.category.lower()
    ]


class QueryResolver:
    """
    Resolves searches against local profiles or the summarizer.

    Rules:
    - local name matches -> return them, ai_summary cleared
    - no local match     -> empty profiles, ai_summary from the summarizer
    - blank query        -> all profiles, summarizer not called
    """

    def __init__(self, summarizer: Summarizer):
        self.summarizer = summarizer

    async def resolve(self, query: str, profiles: Iterable[Profile], language: str) -> SearchResult:
        query = (query or "").strip()
        profiles = list(profiles)

        if not query:
            return SearchResult(query=query, profiles=profiles)

        local_matches = match_names(query, profiles)
        if local_matches:
            return SearchResult(query=query, profiles=local_matches, ai_summary=None)

        language = resolve_language(language)
        logger.info(f"No local match for '{query}', asking archive summarizer ({language})")
        summary = await self.summarizer.summarize(query, language)
        return SearchResult(query=query, profiles=[], ai_summary=summary)
