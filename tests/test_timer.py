import time

import pytest

from cliparts.timer import AutoTimer, Timer


def test_ms_times():
    timer = Timer("My Timer")
    time.sleep(0.123)
    output = timer.to_string()
    new_output = (timer / 1000000).to_string()
    assert "My Timer" in output
    assert " ms" in output
    assert " ns" in new_output


def test_big_timer():
    timer = Timer("My Timer", Timer.big)
    output = timer.to_string()
    assert "Time =" in output
    assert "-----------" in output


def test_auto_timer():
    timer = AutoTimer()
    assert "Timer" in timer.to_string()


def test_print_timer():
    timer = AutoTimer()
    assert "Timer" in str(timer)


def test_auto_timer_prints_on_exit(capsys):
    with AutoTimer("Block") as timer:
        assert isinstance(timer, AutoTimer)
    captured = capsys.readouterr()
    assert captured.out.startswith("Block: ")
    assert captured.out.endswith("\n")


def test_time_it_timer():
    timer = Timer()
    output = timer.time_it(lambda: time.sleep(0.01), 0.1)
    assert "ms" in output
    assert output.endswith("tries")


def test_time_it_stops_after_101_runs():
    calls = []
    output = Timer().time_it(lambda: calls.append(1), 1000)
    assert len(calls) == 101
    assert output.endswith("for 101 tries")


def test_simple_format():
    assert Timer.simple("T", "1 s") == "T: 1 s"


@pytest.mark.parametrize(
    "seconds, unit",
    [(2.5e-7, " ns"), (2.5e-4, " us"), (0.25, " ms"), (2.5, " s")],
)
def test_make_time_str_units(seconds, unit):
    assert Timer().make_time_str(seconds).endswith(unit)


def test_make_time_str_value():
    assert Timer().make_time_str(2.5) == "2.5 s"