"""Author identity resolution.

EIP headers list authors as free text, e.g.::

    author: Alice (@Alice), Bob <bob@example.com>

Each bracketed token is either a GitHub handle or an email address. Handles
are used as-is (lowercased); emails are looked up through GitHub user search
so that the same person compares equal across revisions no matter which form
was written.
"""

from __future__ import annotations

import asyncio
import logging

from eipdiff_core.gh.users import find_user_by_email
from eipdiff_core.utils.eip import AUTHOR_RE, match_all

logger = logging.getLogger(__name__)


async def resolve_author(author: str, github) -> str:
    if author.startswith("@"):
        return author.lower()
    # Email address
    login = await asyncio.to_thread(find_user_by_email, github, author)
    return (login or author).lower()


async def get_authors(raw_author_list: str | None, github) -> set[str] | None:
    """Return the canonical handles of every author, or None without an author field."""
    if not raw_author_list:
        return None

    authors = match_all(raw_author_list, AUTHOR_RE, 1)
    resolved = await asyncio.gather(*(resolve_author(author, github) for author in authors))
    return set(resolved)
