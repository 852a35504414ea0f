import pytest

from bgeraser.progress.reporter import ProgressReporter


class TestProgressReporter:
    def test_idle_until_started(self) -> None:
        reporter = ProgressReporter()
        assert reporter.value is None
        assert reporter.tick() is None

    def test_climbs_in_fixed_increments(self) -> None:
        reporter = ProgressReporter(step=10, ceiling=90)
        reporter.start()
        assert [reporter.tick() for _ in range(3)] == [10, 20, 30]

    def test_freezes_at_ceiling(self) -> None:
        reporter = ProgressReporter(step=40, ceiling=90)
        reporter.start()
        values = [reporter.tick() for _ in range(5)]
        assert values == [40, 80, 90, 90, 90]
        assert reporter.in_flight

    def test_complete_jumps_to_100(self) -> None:
        reporter = ProgressReporter()
        reporter.start()
        reporter.tick()
        assert reporter.complete() == 100
        assert not reporter.in_flight
        assert reporter.tick() == 100

    def test_fail_resets_to_none(self) -> None:
        reporter = ProgressReporter()
        reporter.start()
        reporter.tick()
        reporter.fail()
        assert reporter.value is None
        assert reporter.tick() is None

    @pytest.mark.parametrize(("step", "ceiling"), [(0, 90), (10, 0), (10, 100)])
    def test_rejects_invalid_configuration(self, step: int, ceiling: int) -> None:
        with pytest.raises(ValueError):
            ProgressReporter(step=step, ceiling=ceiling)
