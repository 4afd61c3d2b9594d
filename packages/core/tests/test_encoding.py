import base64

import pytest

from eipdiff_core.errors import EncodingError
from eipdiff_core.utils.encoding import SUPPORTED_ENCODINGS, decode_content, require_encoding


def test_base64_is_supported():
    assert require_encoding("base64", "eip-1.md") == "base64"


@pytest.mark.parametrize("encoding", ["none", "", None, "utf-16"])
def test_unsupported_encoding_raises(encoding):
    with pytest.raises(EncodingError) as exc_info:
        require_encoding(encoding, "EIPS/eip-1.md")
    assert exc_info.value.filename == "EIPS/eip-1.md"
    assert exc_info.value.encoding == encoding


def test_decodes_github_base64_with_line_breaks():
    # The contents API returns base64 wrapped over several lines.
    encoded = base64.encodebytes(("status: Draft\n" * 10).encode()).decode()
    assert "\n" in encoded.strip()
    assert decode_content(encoded, "base64") == "status: Draft\n" * 10


def test_invalid_utf8_is_replaced():
    encoded = base64.b64encode(b"caf\xe9").decode()
    assert decode_content(encoded, "base64") == "caf\ufffd"


def test_plain_text_encodings_pass_through():
    assert decode_content("---\neip: 1\n---\n", "utf-8") == "---\neip: 1\n---\n"


def test_hex():
    assert decode_content("6869", "hex") == "hi"


def test_every_supported_encoding_decodes():
    for encoding in SUPPORTED_ENCODINGS:
        assert isinstance(decode_content("", encoding), str)
