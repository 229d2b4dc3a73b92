"""
Content-type sniffing for byte samples.

The heuristic only looks at the first bytes of a file: a byte-order mark wins,
a NUL byte or a known binary magic number means binary, anything else is
treated as UTF-8. It deliberately does not validate the UTF-8; the emitter's
strict decode catches files whose sample only looked textual.
"""

from enum import Enum
from typing import Callable, Tuple

# Only this many bytes of the sample are scanned for NUL bytes
MAX_SCAN_SIZE = 1024


class ContentType(Enum):
    BINARY = "binary"
    UTF_8 = "utf-8"
    UTF_8_BOM = "utf-8-bom"
    UTF_16LE = "utf-16le"
    UTF_16BE = "utf-16be"
    UTF_32LE = "utf-32le"
    UTF_32BE = "utf-32be"


# Order matters: the UTF-32LE mark starts with the UTF-16LE one
BYTE_ORDER_MARKS: Tuple[Tuple[bytes, ContentType], ...] = (
    (b"\xef\xbb\xbf", ContentType.UTF_8_BOM),
    (b"\xff\xfe\x00\x00", ContentType.UTF_32LE),
    (b"\x00\x00\xfe\xff", ContentType.UTF_32BE),
    (b"\xff\xfe", ContentType.UTF_16LE),
    (b"\xfe\xff", ContentType.UTF_16BE),
)

MAGIC_NUMBERS: Tuple[bytes, ...] = (
    b"%PDF",
)

TEXT_TYPES = frozenset({
    ContentType.UTF_8,
    ContentType.UTF_8_BOM,
    ContentType.UTF_16LE,
    ContentType.UTF_16BE,
})

# Every text type is read back as strict UTF-8 so the body is copied verbatim.
# A UTF-8 BOM stays in the content; a UTF-16 file fails the decode and is
# reported instead of being transcoded.
DECODERS = {
    ContentType.UTF_8: "utf-8",
    ContentType.UTF_8_BOM: "utf-8",
    ContentType.UTF_16LE: "utf-8",
    ContentType.UTF_16BE: "utf-8",
}

Classifier = Callable[[bytes], ContentType]


def inspect(sample: bytes) -> ContentType:
    """Classify a leading byte sample of a file."""
    for bom, content_type in BYTE_ORDER_MARKS:
        if sample.startswith(bom):
            return content_type

    if b"\x00" in sample[:MAX_SCAN_SIZE]:
        return ContentType.BINARY

    if any(sample.startswith(magic) for magic in MAGIC_NUMBERS):
        return ContentType.BINARY

    return ContentType.UTF_8


def is_text(content_type: ContentType) -> bool:
    return content_type in TEXT_TYPES


def decode(data: bytes, content_type: ContentType) -> str:
    """Strictly decode a whole file according to its classification.

    Raises UnicodeDecodeError on invalid input and ValueError for a content
    type that is not textual.
    """
    try:
        codec = DECODERS[content_type]
    except KeyError:
        raise ValueError(f"not a text content type: {content_type.value}")
    return data.decode(codec, errors="strict")
