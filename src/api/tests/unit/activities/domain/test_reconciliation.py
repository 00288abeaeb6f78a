"""Unit tests for set reconciliation of group memberships."""

import random

import pytest

from activities.domain.reconciliation import MembershipDelta, reconcile, unique_in_order


class TestUniqueInOrder:
    def test_keeps_first_occurrence(self):
        assert unique_in_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

    def test_empty(self):
        assert unique_in_order([]) == []


class TestReconcile:
    def test_removes_missing_and_adds_new(self):
        current = {"s1": "a1", "s2": "a2"}

        delta = reconcile(current, ["s2", "s3"])

        assert delta.to_remove == ("a1",)
        assert delta.to_add == ("s3",)

    def test_same_set_is_empty_delta(self):
        delta = reconcile({"s1": "a1", "s2": "a2"}, ["s2", "s1"])

        assert delta.is_empty
        assert delta == MembershipDelta(to_remove=(), to_add=())

    def test_empty_desired_removes_everything(self):
        delta = reconcile({"s1": "a1", "s2": "a2"}, [])

        assert set(delta.to_remove) == {"a1", "a2"}
        assert delta.to_add == ()

    def test_empty_current_adds_everything_in_order(self):
        delta = reconcile({}, ["s3", "s1", "s2"])

        assert delta.to_add == ("s3", "s1", "s2")

    def test_duplicates_in_desired_are_added_once(self):
        delta = reconcile({}, ["s1", "s1", "s2"])

        assert delta.to_add == ("s1", "s2")

    def test_accepts_generators(self):
        delta = reconcile({"s1": "a1"}, (s for s in ["s2"]))

        assert delta.to_add == ("s2",)
        assert delta.to_remove == ("a1",)


class TestReconcileProperties:
    """Checks over many generated current/desired sets."""

    @pytest.mark.parametrize("seed", range(50))
    def test_applying_delta_yields_exactly_desired(self, seed):
        rng = random.Random(seed)
        universe = [f"s{i}" for i in range(12)]
        current_ids = rng.sample(universe, rng.randint(0, len(universe)))
        desired = [rng.choice(universe) for _ in range(rng.randint(0, 15))]
        current = {staff: f"assignment-{staff}" for staff in current_ids}

        delta = reconcile(current, desired)

        removed_staff = {s for s, a in current.items() if a in set(delta.to_remove)}
        final = (set(current) - removed_staff) | set(delta.to_add)
        assert final == set(desired)
        assert set(delta.to_add).isdisjoint(current)
        assert removed_staff.isdisjoint(desired)
        assert len(delta.to_add) == len(set(delta.to_add))

    @pytest.mark.parametrize("seed", range(20))
    def test_reconciling_the_result_again_is_empty(self, seed):
        rng = random.Random(seed)
        universe = [f"s{i}" for i in range(8)]
        current = {s: f"a-{s}" for s in rng.sample(universe, rng.randint(0, 8))}
        desired = rng.sample(universe, rng.randint(0, 8))

        delta = reconcile(current, desired)
        after = {s: a for s, a in current.items() if a not in delta.to_remove}
        after.update({s: f"new-{s}" for s in delta.to_add})

        assert reconcile(after, desired).is_empty
