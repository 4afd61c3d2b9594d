"""Records passed between the fetch, format and diff stages.

All of them live for a single comparison only. Nothing here is cached or
persisted between invocations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FileReference:
    """The file under comparison, as listed in the pull request."""

    filename: str


@dataclass
class FrontMatter:
    """Front-matter attributes plus the document body that follows them.

    Attribute values are kept as the raw strings found in the header. Each
    consumer decides which keys it needs; nothing is validated at parse time.
    """

    attributes: dict[str, Any] = field(default_factory=dict)
    body: str = ""

    def get(self, key: str) -> str | None:
        return self.attributes.get(key)


@dataclass
class ParsedContent:
    path: str
    name: str
    content: FrontMatter


@dataclass
class FormattedFile:
    """Normalized view of one revision of an EIP file."""

    eip_num: str | None
    status: str | None
    authors: set[str] | None  # None = no author field at all
    name: str
    filename_eip_num: int
    category: str | None
    type: str | None

    def to_dict(self) -> dict:
        return {
            "eip_num": self.eip_num,
            "status": self.status,
            "authors": sorted(self.authors) if self.authors is not None else None,
            "name": self.name,
            "filename_eip_num": self.filename_eip_num,
            "category": self.category,
            "type": self.type,
        }


@dataclass
class FileDiff:
    head: FormattedFile
    base: FormattedFile  # equal to head when the file did not exist at base

    def to_dict(self) -> dict:
        return {"head": self.head.to_dict(), "base": self.base.to_dict()}


@dataclass(frozen=True)
class ChangeRequest:
    """Revision references of the pull request being evaluated."""

    number: int
    head_sha: str
    base_sha: str


@dataclass
class DiffContext:
    """Everything get_file_diff reads from the outside world.

    Built once per run (see gh.pull_request.build_diff_context) and passed in
    explicitly, so the core never reads tokens or PR numbers from process state.
    """

    github: Any  # github.Github, used for user search
    repo: Any  # github.Repository.Repository, used for content retrieval
    change_request: ChangeRequest | None = None
