"""Compare one EIP file at the base and head of a pull request.

Content is fetched through the GitHub API pinned to the PR's head and base
SHAs, so both sides are immutable snapshots no matter when the comparison
runs. The result is a pair of FormattedFile records that rule checks can
compare field by field.
"""

from __future__ import annotations

import asyncio
import logging

import requests
from github import GithubException

from eipdiff_core.authors import get_authors
from eipdiff_core.errors import ContextMissingError, ExtractionError, FetchError, HeaderParseError
from eipdiff_core.models import ChangeRequest, DiffContext, FileDiff, FileReference, FormattedFile, ParsedContent
from eipdiff_core.utils.eip import FrontMatterAttributes, assert_category, extract_filename_eip_num
from eipdiff_core.utils.encoding import decode_content, require_encoding
from eipdiff_core.utils.front_matter import parse_front_matter

logger = logging.getLogger(__name__)


def require_change_request(context: DiffContext) -> ChangeRequest:
    if context.change_request is None:
        raise ContextMissingError("No active pull request; cannot compare file revisions.")
    return context.change_request


def get_parsed_content(repo, filename: str, ref: str) -> ParsedContent:
    """Fetch ``filename`` at ``ref`` and split it into front matter and body."""
    logger.debug("Fetching %s at %s", filename, ref)
    try:
        data = repo.get_contents(filename, ref=ref)
    except (GithubException, requests.exceptions.RequestException) as e:
        raise FetchError(filename, ref, f"could not be retrieved: {e}") from e

    if isinstance(data, list):
        raise FetchError(filename, ref, "is a directory")
    if not data.content:
        raise FetchError(filename, ref, "contains no content")
    if not data.path:
        raise FetchError(filename, ref, "has no path")
    if not data.name:
        raise FetchError(filename, ref, "has no name")

    encoding = require_encoding(data.encoding, filename)
    text = decode_content(data.content, encoding)

    return ParsedContent(path=data.path, name=data.name, content=parse_front_matter(text, filename))


_FORMATTED_ATTRIBUTES = (
    FrontMatterAttributes.EIP,
    FrontMatterAttributes.STATUS,
    FrontMatterAttributes.AUTHOR,
    FrontMatterAttributes.CATEGORY,
    FrontMatterAttributes.TYPE,
)


def _require_scalar_attributes(file: ParsedContent) -> None:
    # YAML lists or mappings under these keys cannot be lowercased or matched.
    for key in _FORMATTED_ATTRIBUTES:
        value = file.content.get(key)
        if value is not None and not isinstance(value, str):
            raise HeaderParseError(file.path, f"{key!r} must be a single value, got {type(value).__name__}")


async def format_file(file: ParsedContent, github) -> FormattedFile:
    filename_eip_num = extract_filename_eip_num(file.name)
    if filename_eip_num is None:
        raise ExtractionError(file.path)
    _require_scalar_attributes(file)

    attributes = file.content
    status = attributes.get(FrontMatterAttributes.STATUS)
    classification = assert_category(
        maybe_category=attributes.get(FrontMatterAttributes.CATEGORY),
        file_name=file.name,
        maybe_type=attributes.get(FrontMatterAttributes.TYPE),
    )

    return FormattedFile(
        eip_num=attributes.get(FrontMatterAttributes.EIP),
        status=status.lower() if status is not None else None,
        authors=await get_authors(attributes.get(FrontMatterAttributes.AUTHOR), github),
        name=file.name,
        filename_eip_num=filename_eip_num,
        category=classification.category,
        type=classification.type,
    )


async def get_file_diff(file: FileReference, context: DiffContext) -> FileDiff:
    """Return the formatted file at the head and base of the active pull request.

    If the base revision cannot be fetched, for whatever reason, the head
    content stands in for it: a file added by the PR has no base, and a
    failed fetch is treated the same way.
    """
    change_request = require_change_request(context)
    filename = file.filename

    head = await asyncio.to_thread(get_parsed_content, context.repo, filename, change_request.head_sha)
    try:
        base = await asyncio.to_thread(get_parsed_content, context.repo, filename, change_request.base_sha)
    except Exception as e:
        logger.info("Using head content as base for %s: %s", filename, e)
        base = head

    return FileDiff(
        head=await format_file(head, context.github),
        base=await format_file(base, context.github),
    )
