import pytest
from models.hash_result import AlgorithmKind, HashResult
from utils.result_formatter import (
    algorithm_display_name,
    build_description,
    describe,
    format_bytes,
    format_report_lines,
    format_summary,
)

DIGEST = "5eb63bbbe01eeed093cb22bb8f5acdc3"


def make_result(**overrides):
    data = dict(
        algorithm=AlgorithmKind.MD5,
        hash=DIGEST,
        filename="hello.txt",
        file_size=11,
        chunk_size=4 * 1024 * 1024,
    )
    data.update(overrides)
    data.setdefault(
        "description",
        build_description(data["filename"], data["file_size"], data["algorithm"], data["hash"]),
    )
    return HashResult(**data)


@pytest.mark.parametrize("num_bytes,expected", [
    (0, "0 bytes"),
    (1, "1 bytes"),
    (1023, "1023 bytes"),
    (1024, "1.0 kb (kilobytes)"),
    (1025, "1.0 kb (kilobytes)"),
    (1536, "1.5 kb (kilobytes)"),
    (2048, "2.0 kb (kilobytes)"),
    (5 * 1024 * 1024, "5120.0 kb (kilobytes)"),
])
def test_format_bytes(num_bytes, expected):
    assert format_bytes(num_bytes) == expected


@pytest.mark.parametrize("kind,expected", [
    (AlgorithmKind.MD5, "MD5"),
    (AlgorithmKind.SHA1, "SHA-1"),
    (AlgorithmKind.SHA256, "SHA-256"),
    (AlgorithmKind.SHA512, "SHA-512"),
    ("sha256", "SHA-256"),
])
def test_algorithm_display_name(kind, expected):
    assert algorithm_display_name(kind) == expected


@pytest.mark.parametrize("value", ["sha384", "SHA-256", "", "crc32"])
def test_algorithm_display_name_unknown(value):
    assert algorithm_display_name(value) == "Unknown"


@pytest.mark.parametrize("kind,display_name", [
    (AlgorithmKind.MD5, "MD5"),
    (AlgorithmKind.SHA1, "SHA-1"),
    (AlgorithmKind.SHA256, "SHA-256"),
    (AlgorithmKind.SHA512, "SHA-512"),
])
def test_build_description_sentence(kind, display_name):
    digest = "ab" * kind.digest_size
    assert build_description("test_hash_calc.txt", 57, kind, digest) == (
        f'"test_hash_calc.txt", with size of 57 bytes, and file hash using the hashing '
        f'algorithm {display_name} has the value : {digest}.'
    )


def test_build_description_uses_kilobytes_for_large_files():
    text = build_description("big.iso", 1536, AlgorithmKind.SHA1, "ab" * 20)
    assert text.startswith('"big.iso", with size of 1.5 kb (kilobytes), and file hash')


@pytest.mark.parametrize("file_size", [0, 1023, 1024, 1536, 2048])
def test_describe_matches_stored_description(file_size):
    result = make_result(file_size=file_size)
    assert describe(result) == result.description
    assert format_bytes(file_size) in describe(result)


def test_describe_renders_from_fields():
    result = make_result(algorithm=AlgorithmKind.SHA256, hash="cd" * 32, filename="a b.txt",
                         file_size=2048, description="stale")
    assert describe(result) == (
        f'"a b.txt", with size of 2.0 kb (kilobytes), and file hash using the hashing '
        f'algorithm SHA-256 has the value : {"cd" * 32}.'
    )


def test_format_summary_block():
    assert format_summary(make_result()) == (
        "File: hello.txt\n"
        "Algorithm: MD5\n"
        f"Hash: {DIGEST}\n"
        "Size: 11 bytes\n"
    )


def test_format_report_lines_order():
    assert format_report_lines(make_result(file_size=1024)) == [
        "File: hello.txt",
        "Size: 1.0 kb (kilobytes)",
        "Algorithm: MD5",
        f"Hash: {DIGEST}",
    ]
