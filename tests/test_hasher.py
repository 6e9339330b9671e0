"""
Unit tests for DigestComputerImpl with XXHashAlgorithmImpl.
Verifies streaming digests and graceful handling of unreadable files.
"""
import xxhash
from unittest import mock

from dupfind.core.hasher import DigestComputerImpl, XXHashAlgorithmImpl, CHUNK_SIZE
from dupfind.core.models import FileRecord


class TestDigestComputer:
    """Test whole-file digests computed chunk by chunk."""

    def test_same_content_produces_same_digest(self, temp_dir, make_record):
        """Identical files must produce identical hex digests."""
        content = b"test content " * 1000
        (temp_dir / "one").write_bytes(content)
        (temp_dir / "two").write_bytes(content)

        digester = DigestComputerImpl()
        d1 = digester.compute(make_record(temp_dir / "one"))
        d2 = digester.compute(make_record(temp_dir / "two"))

        assert d1 == d2
        assert isinstance(d1, str)
        assert len(d1) == 16  # xxHash64 = 8 bytes = 16 hex chars

    def test_different_content_produces_different_digests(self, temp_dir, make_record):
        (temp_dir / "one").write_bytes(b"A" * 1024)
        (temp_dir / "two").write_bytes(b"B" * 1024)

        digester = DigestComputerImpl()
        assert digester.compute(make_record(temp_dir / "one")) != \
            digester.compute(make_record(temp_dir / "two"))

    def test_streamed_digest_matches_one_shot_digest(self, temp_dir, make_record):
        """Chunked reading must fold every byte, including the partial last chunk."""
        content = bytes(range(256)) * ((3 * CHUNK_SIZE) // 256) + b"tail"
        path = temp_dir / "big"
        path.write_bytes(content)

        digest = DigestComputerImpl().compute(make_record(path))

        assert digest == xxhash.xxh64(content).hexdigest()

    def test_empty_file_has_a_digest(self, temp_dir, make_record):
        path = temp_dir / "empty"
        path.write_bytes(b"")

        assert DigestComputerImpl().compute(make_record(path)) == xxhash.xxh64(b"").hexdigest()

    def test_state_is_fresh_for_every_file(self, temp_dir, make_record):
        """Digesting another file in between must not change the result."""
        (temp_dir / "one").write_bytes(b"first")
        (temp_dir / "two").write_bytes(b"second")
        digester = DigestComputerImpl()

        first = digester.compute(make_record(temp_dir / "one"))
        digester.compute(make_record(temp_dir / "two"))
        again = digester.compute(make_record(temp_dir / "one"))

        assert first == again

    def test_missing_file_is_skipped_with_warning(self, temp_dir, caplog):
        """Open failure is non-fatal: None is returned and the path is named in a warning."""
        record = FileRecord(path=str(temp_dir / "gone"), size=7)

        with caplog.at_level("WARNING"):
            assert DigestComputerImpl().compute(record) is None

        assert "gone" in caplog.text
        assert any(r.levelname == "WARNING" for r in caplog.records)

    def test_read_error_after_open_is_skipped_with_error(self, temp_dir, make_record, caplog):
        path = temp_dir / "file"
        path.write_bytes(b"content")
        record = make_record(path)

        broken = mock.mock_open()
        broken.return_value.read.side_effect = OSError(5, "Input/output error")
        with mock.patch("builtins.open", broken), caplog.at_level("ERROR"):
            assert DigestComputerImpl().compute(record) is None

        assert "read error" in caplog.text

    def test_custom_algorithm_is_used(self, temp_dir, make_record, constant_algorithm):
        (temp_dir / "one").write_bytes(b"x")
        digester = DigestComputerImpl(constant_algorithm)

        assert digester.compute(make_record(temp_dir / "one")) == "0" * 16

    def test_default_algorithm_is_xxh64(self):
        assert DigestComputerImpl().algorithm.name == XXHashAlgorithmImpl.name == "xxh64"
