from __future__ import annotations

import base64
import binascii

from eipdiff_core.errors import EncodingError

# GitHub's contents API reports "base64" for regular files and "none" for
# files above 1 MB (whose content is omitted). The remaining entries cover
# payloads handed over already decoded.
_DECODERS = {
    "base64": lambda content: base64.b64decode(content),
    "utf-8": lambda content: content.encode("utf-8"),
    "utf8": lambda content: content.encode("utf-8"),
    "ascii": lambda content: content.encode("ascii", errors="replace"),
    "latin1": lambda content: content.encode("latin-1", errors="replace"),
    "hex": lambda content: binascii.unhexlify("".join(content.split())),
}

SUPPORTED_ENCODINGS = frozenset(_DECODERS)


def require_encoding(encoding: str | None, filename: str) -> str:
    """Return the encoding tag if it can be decoded, else raise EncodingError."""
    if encoding not in SUPPORTED_ENCODINGS:
        raise EncodingError(encoding, filename)
    return encoding


def decode_content(content: str, encoding: str) -> str:
    """Decode a contents-API payload to text. Invalid UTF-8 bytes are replaced."""
    return _DECODERS[encoding](content).decode("utf-8", errors="replace")
