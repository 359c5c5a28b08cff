"""Tests for size reconciliation of pinned regions."""

import pytest

from pinpane.core.types import PIN_SIZE, Axis, ReconcileStatus
from pinpane.exceptions import ReconcileResizeFailedError


class TestRatioAndAbsoluteSizes:
    """Target sizes follow the current frame."""

    def test_ratio_follows_frame_width(self, host, sticky):
        """Width 1000 at 0.3 is 300; after resizing the frame to 800 it is 240."""
        region = sticky.create_pinned("notes", "left", 0.3)
        assert host.region_size(region, Axis.WIDTH) == 300

        host.set_frame_size(800, 600)

        assert host.region_size(region, Axis.WIDTH) == 240

    def test_ratio_grows_with_frame(self, host, sticky):
        region = sticky.create_pinned("notes", "right", 0.3)

        host.set_frame_size(1200, 600)

        assert host.region_size(region, Axis.WIDTH) == 360

    def test_ratio_rounds_to_cells(self, host, sticky):
        region = sticky.create_pinned("notes", "left", 0.3)

        host.set_frame_size(310, 600)

        assert host.region_size(region, Axis.WIDTH) == 93

    def test_absolute_size_ignores_frame_height(self, host, sticky):
        """A 200-cell bottom region stays 200 high whatever the frame does."""
        region = sticky.create_pinned("log", "bottom", 200)

        for height in (400, 900, 600):
            host.set_frame_size(1000, height)
            assert host.region_size(region, Axis.HEIGHT) == 200

    def test_manual_resize_is_undone(self, host, sticky):
        """Resizing a pinned region by hand triggers a pass that restores it."""
        region = sticky.create_pinned("notes", "left", 0.3)

        host.resize_region(region, 50, Axis.WIDTH)

        assert host.region_size(region, Axis.WIDTH) == 300

    def test_split_triggers_reconciliation(self, host, sticky):
        region = sticky.create_pinned("notes", "left", 0.3)
        # Changing the stored size alone does not fire any event
        region.attributes[PIN_SIZE] = 0.25
        assert host.region_size(region, Axis.WIDTH) == 300

        host.split_region("second")

        assert host.region_size(region, Axis.WIDTH) == 250


class TestOutcomes:
    """Per-region outcomes of a reconciliation pass."""

    def test_idempotent(self, host, sticky):
        """A second pass with no layout change resizes nothing."""
        sticky.create_pinned("notes", "left", 0.3)
        sticky.create_pinned("log", "bottom", 120)
        host.set_frame_size(900, 500)

        first = sticky.reconcile()
        sizes = [host.region_size(o.region, Axis.WIDTH) for o in first]
        second = sticky.reconcile()

        assert [o.status for o in second] == [ReconcileStatus.UNCHANGED] * 2
        assert all(o.delta == 0 for o in second)
        assert [host.region_size(o.region, Axis.WIDTH) for o in second] == sizes

    def test_resized_outcome_reports_delta(self, host, sticky):
        region = sticky.create_pinned("notes", "left", 0.3)
        sticky.set_enabled(False)
        host.set_frame_size(800, 600)

        [outcome] = sticky.reconcile()

        assert outcome.region is region
        assert outcome.status is ReconcileStatus.RESIZED
        assert outcome.current == 300
        assert outcome.target == 240
        assert outcome.delta == -60
        assert outcome.ok

    def test_no_pinned_regions(self, sticky):
        assert sticky.reconcile() == []

    def test_dead_region_skipped(self, host, sticky):
        """A region destroyed before its callback runs is skipped."""
        region = sticky.create_pinned("notes", "left", 0.3)
        host.remove_region(region)

        outcome = sticky.reconciler.reconcile(region)

        assert outcome.status is ReconcileStatus.SKIPPED
        assert outcome.delta == 0


class TestFailures:
    """A region that cannot be resized does not stop the others."""

    def test_failure_is_reported_and_others_continue(self, host, sticky):
        left = sticky.create_pinned("left", "left", 0.3)
        right = sticky.create_pinned("right", "right", 0.2)
        # Impossible target for the first region, reachable one for the second
        left.attributes[PIN_SIZE] = 0.9
        right.attributes[PIN_SIZE] = 0.25

        outcomes = sticky.reconcile()

        assert [o.region for o in outcomes] == [left, right]
        failed, resized = outcomes
        assert failed.status is ReconcileStatus.FAILED
        assert not failed.ok
        assert isinstance(failed.error, ReconcileResizeFailedError)
        assert resized.status is ReconcileStatus.RESIZED
        assert host.region_size(left, Axis.WIDTH) == 300
        assert host.region_size(right, Axis.WIDTH) == 250

    def test_failure_goes_to_diagnostic_channel(self, host, sticky, caplog):
        region = sticky.create_pinned("left", "left", 0.3)
        region.attributes[PIN_SIZE] = 995

        with caplog.at_level("WARNING", logger="pinpane"):
            sticky.reconcile()

        severities = [severity for severity, _ in host.messages]
        assert "warning" in severities
        assert any("Could not restore pinned region width" in m for _, m in host.messages)
        assert "Could not restore pinned region width" in caplog.text

    def test_failed_region_retried_on_next_change(self, host, sticky):
        """The next layout change is the retry."""
        region = sticky.create_pinned("notes", "left", 0.3)
        region.attributes[PIN_SIZE] = 1200
        [outcome] = sticky.reconcile()
        assert outcome.status is ReconcileStatus.FAILED

        host.set_frame_size(1400, 600)

        assert host.region_size(region, Axis.WIDTH) == 1200

    def test_one_warning_per_failing_region(self, host, sticky):
        """A direct pass is not re-entered by the resizes it makes itself."""
        left = sticky.create_pinned("left", "left", 0.3)
        right = sticky.create_pinned("right", "right", 0.2)
        left.attributes[PIN_SIZE] = 0.9
        right.attributes[PIN_SIZE] = 0.25
        host.messages.clear()

        visited = []
        reconcile = sticky.reconciler.reconcile

        def spy(region):
            visited.append(region.content)
            return reconcile(region)

        sticky.reconciler.reconcile = spy
        outcomes = sticky.reconcile()

        assert visited == ["left", "right"]
        assert len(outcomes) == 2
        warnings = [m for severity, m in host.messages if severity == "warning"]
        assert len(warnings) == 1
        assert "Could not restore pinned region width" in warnings[0]

    def test_failure_logged_once_at_warning(self, host, sticky, caplog):
        region = sticky.create_pinned("left", "left", 0.3)
        region.attributes[PIN_SIZE] = 995

        with caplog.at_level("WARNING", logger="pinpane"):
            sticky.reconcile()

        warnings = [r for r in caplog.records if r.levelname == "WARNING"]
        assert len(warnings) == 1


class TestReentrancy:
    """Passes never run inside each other."""

    def test_nested_call_returns_nothing(self, host, sticky):
        region = sticky.create_pinned("notes", "left", 0.3)
        nested = []
        resize = host.resize_region

        def resize_and_reenter(target, delta, axis):
            resize(target, delta, axis)
            nested.append(sticky.reconciler.reconcile_all("nested"))

        host.resize_region = resize_and_reenter
        host.set_frame_size(800, 600)

        assert nested == [[]]
        assert host.region_size(region, Axis.WIDTH) == 240

    def test_running_flag_reset_after_error(self, host, sticky):
        """An unexpected error does not leave the reconciler locked."""
        region = sticky.create_pinned("notes", "left", 0.3)
        sticky.set_enabled(False)
        host.set_frame_size(800, 600)

        def broken(target, delta, axis):
            raise RuntimeError("engine crashed")

        host.resize_region = broken
        with pytest.raises(RuntimeError):
            sticky.reconcile()
        del host.resize_region

        [outcome] = sticky.reconcile()

        assert outcome.status is ReconcileStatus.RESIZED
        assert host.region_size(region, Axis.WIDTH) == 240
