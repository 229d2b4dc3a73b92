import pytest

from folder_to_text.content_type import ContentType, decode, inspect, is_text


@pytest.mark.parametrize("sample, expected", [
    (b"plain ascii\n", ContentType.UTF_8),
    ("café 日本".encode("utf-8"), ContentType.UTF_8),
    (b"\xef\xbb\xbfwith bom", ContentType.UTF_8_BOM),
    (b"\xff\xfeh\x00i\x00", ContentType.UTF_16LE),
    (b"\xfe\xff\x00h\x00i", ContentType.UTF_16BE),
    (b"\xff\xfe\x00\x00h\x00\x00\x00", ContentType.UTF_32LE),
    (b"\x00\x00\xfe\xff\x00\x00\x00h", ContentType.UTF_32BE),
    (b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR", ContentType.BINARY),
    (b"%PDF-1.7\n", ContentType.BINARY),
])
def test_inspect_classifies_samples(sample, expected):
    assert inspect(sample) == expected


def test_empty_sample_is_utf8():
    assert inspect(b"") == ContentType.UTF_8
    assert is_text(inspect(b""))


def test_nul_byte_beyond_scan_window_is_ignored():
    sample = b"a" * 1024 + b"\x00"
    assert inspect(sample) == ContentType.UTF_8


def test_invalid_utf8_without_nul_still_looks_like_text():
    # The strict decode is what rejects these files later on
    assert inspect(b"abc\xff\xfedef") == ContentType.UTF_8


def test_only_utf8_and_utf16_are_text():
    assert {t for t in ContentType if is_text(t)} == {
        ContentType.UTF_8,
        ContentType.UTF_8_BOM,
        ContentType.UTF_16LE,
        ContentType.UTF_16BE,
    }


def test_decode_keeps_utf8_bom():
    assert decode(b"\xef\xbb\xbfhi", ContentType.UTF_8_BOM) == "\ufeffhi"


def test_utf16_content_is_decoded_as_utf8_and_rejected():
    with pytest.raises(UnicodeDecodeError):
        decode(b"\xff\xfe" + "hi\n".encode("utf-16-le"), ContentType.UTF_16LE)
    with pytest.raises(UnicodeDecodeError):
        decode(b"\xfe\xff" + "hi\n".encode("utf-16-be"), ContentType.UTF_16BE)


def test_decode_is_strict():
    with pytest.raises(UnicodeDecodeError):
        decode(b"ok \xff bad", ContentType.UTF_8)


def test_decode_rejects_binary():
    with pytest.raises(ValueError):
        decode(b"\x00", ContentType.BINARY)
