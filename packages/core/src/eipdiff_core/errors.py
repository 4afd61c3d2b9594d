"""Error taxonomy for EIP file diffing.

Every failure carries the structured fields a caller needs to branch on
(filename, ref, path) instead of only an interpolated message, so the
rule-evaluation layer can report which file and which revision broke.
"""

from __future__ import annotations


class EipDiffError(Exception):
    """Base class for every error raised by eipdiff_core."""


class ContextMissingError(EipDiffError):
    """No active pull request to compare revisions against."""


class FetchError(EipDiffError):
    def __init__(self, filename: str, ref: str, reason: str):
        self.filename = filename
        self.ref = ref
        self.reason = reason
        super().__init__(f"requested file {filename} at ref {ref} {reason}")


class EncodingError(EipDiffError):
    def __init__(self, encoding: str | None, filename: str):
        self.encoding = encoding
        self.filename = filename
        super().__init__(f"file {filename} has unsupported encoding {encoding!r}")


class HeaderParseError(EipDiffError):
    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"could not parse front matter of {filename or '<unknown>'}: {reason}")


class ExtractionError(EipDiffError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Failed to extract eip number from file "{path}"')


class ClassificationError(EipDiffError):
    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"{file_name}: {reason}")
