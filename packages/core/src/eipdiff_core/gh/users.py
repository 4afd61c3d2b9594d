from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def find_user_by_email(github, email: str) -> str | None:
    """Return ``@login`` of the first GitHub user matching ``email``, or None.

    A search that finds nobody logs a warning; errors from the search API
    itself are left to propagate.
    """
    results = github.search_users(email)
    if results.totalCount > 0:
        first = next(iter(results), None)
        if first is not None:
            return "@" + first.login
    logger.warning("No github user found, using email instead: %s", email)
    return None
