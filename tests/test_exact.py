from __future__ import annotations
import pytest # type: ignore
from hllcount.lib.abstractsketch import AbstractSketch
from hllcount.lib.exact import ExactCounter
from hllcount.lib.hyperloglog import HyperLogLog


@pytest.mark.quick
class TestExactCounter:
    """Tests for the exact baseline counter."""

    def test_empty(self):
        counter = ExactCounter()
        assert counter.count() == 0
        assert counter.is_empty()

    def test_duplicates(self, names):
        counter = ExactCounter()
        counter.add_batch(names)
        assert counter.count() == 5
        assert not counter.is_empty()

    def test_str_and_bytes_are_the_same_element(self):
        counter = ExactCounter()
        counter.add_string("Juli")
        counter.add(b"Juli")
        counter.add(bytearray(b"Juli"))
        assert counter.count() == 1

    def test_add_rejects_str(self):
        with pytest.raises(TypeError):
            ExactCounter().add("Juli")

    def test_memory_grows_with_elements(self, distinct_items):
        counter = ExactCounter()
        empty = counter.memory_bytes()
        counter.add_batch(distinct_items(1000))
        assert counter.memory_bytes() > empty


@pytest.mark.quick
class TestAbstractSketch:
    """Tests for the shared base class and its hash helpers."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            AbstractSketch()

    def test_hash64_deterministic(self):
        assert AbstractSketch._hash64(b"Ridho") == AbstractSketch._hash64(b"Ridho")
        assert AbstractSketch._hash64(b"Ridho") != AbstractSketch._hash64(b"Rizki")

    def test_hash64_seeded(self):
        assert AbstractSketch._hash64(b"Siti", seed=1) != AbstractSketch._hash64(b"Siti", seed=2)

    def test_hash64_range(self):
        for data in (b"", b"a", b"Sigma Balls"):
            assert 0 <= AbstractSketch._hash64(data) < 2 ** 64
        assert 0 <= AbstractSketch._hash64_int(-5) < 2 ** 64

    def test_instance_hash_uses_seed(self):
        sketch = HyperLogLog(precision=8, seed=7)
        assert sketch.hash64(b"x") == AbstractSketch._hash64(b"x", seed=7)
        assert ExactCounter().hash64(b"x") == AbstractSketch._hash64(b"x", seed=0)


@pytest.mark.full
class TestAgainstExact:
    """HyperLogLog estimates compared with the exact count."""

    @pytest.mark.parametrize("n_items", [50, 500, 5000])
    def test_estimate_tracks_exact(self, distinct_items, n_items):
        items = distinct_items(n_items) + distinct_items(n_items // 2)
        exact = ExactCounter()
        sketch = HyperLogLog(precision=14)
        exact.add_batch(items)
        sketch.add_batch(items)
        truth = exact.count()
        assert truth == n_items
        assert abs(sketch.count() - truth) / truth < 0.06
