"""Tests for the point store."""

import pytest

from smartsegment.models import PointType
from smartsegment.points import PointStore


class TestPointStoreAdd:
    """Tests for PointStore.add."""

    def test_add_assigns_unique_ids(self) -> None:
        """Test that every added point gets a distinct id."""
        store = PointStore()
        points = [store.add(0.1 * i, 0.5, PointType.POSITIVE) for i in range(10)]

        assert len({p.id for p in points}) == 10
        assert len(store) == 10

    def test_add_preserves_insertion_order(self) -> None:
        """Test that iteration follows insertion order."""
        store = PointStore()
        first = store.add(0.9, 0.9, PointType.NEGATIVE)
        second = store.add(0.1, 0.1, PointType.POSITIVE)

        assert [p.id for p in store] == [first.id, second.id]

    def test_add_stores_polarity_and_coordinates(self) -> None:
        """Test that the created point carries the given values."""
        store = PointStore()
        point = store.add(0.25, 0.75, PointType.NEGATIVE)

        assert point.x == 0.25
        assert point.y == 0.75
        assert point.type == PointType.NEGATIVE
        assert not point.is_positive
        assert store.get(point.id) == point

    def test_add_accepts_boundaries(self) -> None:
        """Test that 0.0 and 1.0 are valid coordinates."""
        store = PointStore()
        store.add(0.0, 0.0, PointType.POSITIVE)
        store.add(1.0, 1.0, PointType.POSITIVE)

        assert len(store) == 2

    @pytest.mark.parametrize(("x", "y"), [(-0.01, 0.5), (0.5, 1.01), (2.0, 2.0)])
    def test_add_rejects_out_of_range(self, x: float, y: float) -> None:
        """Test that non-normalized coordinates raise ValueError."""
        store = PointStore()

        with pytest.raises(ValueError, match="normalized"):
            store.add(x, y, PointType.POSITIVE)
        assert len(store) == 0

    def test_add_has_no_cap(self) -> None:
        """Test that the store does not limit the number of points."""
        store = PointStore()
        for _ in range(500):
            store.add(0.5, 0.5, PointType.POSITIVE)

        assert len(store) == 500


class TestPointStoreRemove:
    """Tests for PointStore.remove and clear."""

    def test_remove_existing_point(self) -> None:
        """Test that remove deletes the point and returns it."""
        store = PointStore()
        point = store.add(0.5, 0.5, PointType.POSITIVE)

        assert store.remove(point.id) == point
        assert point.id not in store
        assert len(store) == 0

    def test_remove_missing_point_is_noop(self) -> None:
        """Test that removing an unknown id changes nothing."""
        store = PointStore()
        store.add(0.5, 0.5, PointType.POSITIVE)

        assert store.remove("does-not-exist") is None
        assert len(store) == 1

    def test_remove_twice_is_noop(self) -> None:
        """Test that a second remove of the same id is ignored."""
        store = PointStore()
        point = store.add(0.5, 0.5, PointType.POSITIVE)
        store.remove(point.id)

        assert store.remove(point.id) is None

    def test_ids_stay_unique_across_add_remove(self) -> None:
        """Test id uniqueness through interleaved adds and removes."""
        store = PointStore()
        for i in range(20):
            point = store.add(0.5, 0.5, PointType.POSITIVE if i % 2 else PointType.NEGATIVE)
            if i % 3 == 0:
                store.remove(point.id)
            ids = [p.id for p in store]
            assert len(ids) == len(set(ids))

    def test_clear_empties_store(self) -> None:
        """Test that clear removes every point."""
        store = PointStore()
        store.add(0.1, 0.1, PointType.POSITIVE)
        store.add(0.2, 0.2, PointType.NEGATIVE)

        store.clear()

        assert len(store) == 0
        assert list(store) == []


class TestPointStorePartition:
    """Tests for PointStore.partition_by_polarity."""

    def test_partition_preserves_order(self) -> None:
        """Test that each polarity keeps insertion order."""
        store = PointStore()
        p1 = store.add(0.1, 0.1, PointType.POSITIVE)
        n1 = store.add(0.2, 0.2, PointType.NEGATIVE)
        p2 = store.add(0.3, 0.3, PointType.POSITIVE)
        n2 = store.add(0.4, 0.4, PointType.NEGATIVE)

        positive, negative = store.partition_by_polarity()

        assert positive == (p1, p2)
        assert negative == (n1, n2)

    def test_partition_empty_store(self) -> None:
        """Test partition of an empty store."""
        assert PointStore().partition_by_polarity() == ((), ())

    def test_count_by_polarity(self) -> None:
        """Test counting points per polarity."""
        store = PointStore()
        store.add(0.1, 0.1, PointType.POSITIVE)
        store.add(0.2, 0.2, PointType.POSITIVE)
        store.add(0.3, 0.3, PointType.NEGATIVE)

        assert store.count(PointType.POSITIVE) == 2
        assert store.count(PointType.NEGATIVE) == 1
