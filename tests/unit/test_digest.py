"""Unit tests for the digest engine."""

from __future__ import annotations

import pytest

from jarhunt.core.digest import HASH_ALGORITHM, Digester, compute_digest
from jarhunt.core.exceptions import ReadFailure
from jarhunt.core.models import DigestResult, WorkItem


@pytest.mark.core
@pytest.mark.tra("Domain.Digest")
@pytest.mark.tier(0)
class TestComputeDigest:
    """Tests for compute_digest()."""

    def test_algorithm_is_sha1(self) -> None:
        """Maven Central is searched by SHA-1."""
        assert HASH_ALGORITHM == "sha1"

    def test_empty_input_matches_known_vector(self) -> None:
        """Zero-length input hashes to the published SHA-1 of the empty string."""
        assert compute_digest(b"") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"

    def test_abc_matches_known_vector(self) -> None:
        """'abc' hashes to the FIPS 180 test vector."""
        assert compute_digest(b"abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"

    def test_digest_is_lowercase_hex_of_fixed_length(self) -> None:
        """Digests are 40 lowercase hex characters."""
        digest = compute_digest(b"\x00\xff" * 1000)

        assert len(digest) == 40
        assert digest == digest.lower()
        int(digest, 16)


@pytest.mark.core
@pytest.mark.tra("Domain.Digest")
class TestDigester:
    """Tests for Digester.digest()."""

    @pytest.mark.asyncio
    async def test_digest_reads_file_through_port(self, make_filesystem) -> None:
        """digest() hashes the bytes returned by the filesystem port."""
        fs = make_filesystem({"a.jar": b"abc"})

        result = await Digester(fs).digest(WorkItem("root/a.jar"))

        assert result == DigestResult(
            file_path="root/a.jar",
            sha1="a9993e364706816aba3e25717850c26c9cd0d89d",
        )
        assert fs.reads == ["root/a.jar"]

    @pytest.mark.asyncio
    async def test_digest_of_empty_file(self, make_filesystem) -> None:
        """An empty archive still produces the empty-input digest."""
        fs = make_filesystem({"empty.jar": b""})

        result = await Digester(fs).digest(WorkItem("root/empty.jar"))

        assert result.sha1 == "da39a3ee5e6b4b0d3255bfef95601890afd80709"

    @pytest.mark.asyncio
    async def test_read_error_raises_read_failure(self, make_filesystem) -> None:
        """An OSError from the port becomes ReadFailure naming the path."""
        fs = make_filesystem({"a.jar": b"abc"})
        fs.read_errors.add("root/a.jar")

        with pytest.raises(ReadFailure) as exc_info:
            await Digester(fs).digest(WorkItem("root/a.jar"))

        assert exc_info.value.file_path == "root/a.jar"
        assert isinstance(exc_info.value.cause, FileNotFoundError)
