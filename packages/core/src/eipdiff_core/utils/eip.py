"""EIP naming and classification rules."""

from __future__ import annotations

import re
from dataclasses import dataclass

from eipdiff_core.errors import ClassificationError

# "Alice (@alice)" and "Bob <bob@example.com>"; group 1 is the handle or email.
AUTHOR_RE = re.compile(r"[(<]([^>)]+)[>)]")
EIP_NUM_RE = re.compile(r"eip-(\d+)\.md$")


class FrontMatterAttributes:
    EIP = "eip"
    STATUS = "status"
    AUTHOR = "author"
    CATEGORY = "category"
    TYPE = "type"


STANDARDS_TRACK = "standards track"
META = "meta"
INFORMATIONAL = "informational"
EIP_TYPES = (STANDARDS_TRACK, META, INFORMATIONAL)

EIP_CATEGORIES = ("core", "networking", "interface", "erc")


@dataclass(frozen=True)
class Classification:
    category: str | None
    type: str


def match_all(text: str, pattern: re.Pattern, group: int) -> list[str]:
    return [m.group(group) for m in pattern.finditer(text)]


def extract_filename_eip_num(name: str) -> int | None:
    match = EIP_NUM_RE.search(name or "")
    if not match:
        return None
    return int(match.group(1))


def assert_category(maybe_category: str | None, file_name: str, maybe_type: str | None) -> Classification:
    """Resolve the canonical (category, type) pair of an EIP.

    Category and type are validated together: a Standards Track EIP must
    name one of EIP_CATEGORIES, while Meta and Informational EIPs have no
    category of their own and use their type in its place.
    """
    eip_type = maybe_type.strip().lower() if isinstance(maybe_type, str) else None
    if eip_type not in EIP_TYPES:
        raise ClassificationError(file_name, f"invalid or missing type {maybe_type!r}")

    if eip_type != STANDARDS_TRACK:
        return Classification(category=eip_type, type=eip_type)

    category = maybe_category.strip().lower() if isinstance(maybe_category, str) else None
    if category not in EIP_CATEGORIES:
        raise ClassificationError(
            file_name,
            f"standards track EIP has invalid or missing category {maybe_category!r}",
        )
    return Classification(category=category, type=eip_type)
