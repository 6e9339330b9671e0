"""
Unit tests for DigestIndex.
Verifies bucket creation, insertion order and iteration.
"""
from dupfind.core.index import DigestIndex
from dupfind.core.models import FileRecord


class TestDigestIndex:
    """Test digest → bucket accumulation."""

    def test_first_insert_creates_single_record_bucket(self):
        index = DigestIndex()
        record = FileRecord(path="/a", size=1)

        bucket = index.insert("aa", record)

        assert len(index) == 1
        assert bucket.count == 1
        assert bucket.records == [record]
        assert not bucket.has_candidates()

    def test_records_keep_insertion_order(self):
        """Bucket order is insertion order, not sorted by path."""
        index = DigestIndex()
        records = [FileRecord(path=p, size=1) for p in ("/z", "/a", "/m")]
        for r in records:
            index.insert("same", r)

        bucket = index.get("same")
        assert bucket.count == 3
        assert [r.path for r in bucket.records] == ["/z", "/a", "/m"]

    def test_for_each_visits_every_bucket_once(self):
        index = DigestIndex()
        index.insert("d1", FileRecord(path="/a", size=1))
        index.insert("d2", FileRecord(path="/b", size=1))
        index.insert("d1", FileRecord(path="/c", size=1))

        digests = [b.digest for b in index.for_each()]

        assert sorted(digests) == ["d1", "d2"]
        assert digests == [b.digest for b in index]  # stable order

    def test_candidate_buckets_skip_singletons(self):
        index = DigestIndex()
        index.insert("single", FileRecord(path="/a", size=1))
        index.insert("pair", FileRecord(path="/b", size=1))
        index.insert("pair", FileRecord(path="/c", size=1))

        assert [b.digest for b in index.candidate_buckets()] == ["pair"]

    def test_missing_digest_returns_none(self):
        assert DigestIndex().get("nope") is None
