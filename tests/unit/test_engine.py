import pytest

from src.lcs_engine.algorithms import lcs_dynamic, lcs_for, lcs_rec
from src.lcs_engine.engine import (
    ALGORITHMS,
    Algorithm,
    LcsRun,
    UnknownAlgorithmError,
    algorithm_names,
    benchmark,
    compute_lcs_length,
    run,
)


def test_closed_set_of_algorithms() -> None:
    assert algorithm_names() == ["lcs_for", "lcs_rec", "lcs_dynamic"]
    assert set(ALGORITHMS) == set(Algorithm)
    assert ALGORITHMS[Algorithm.GREEDY_SCAN] is lcs_for
    assert ALGORITHMS[Algorithm.RECURSIVE] is lcs_rec
    assert ALGORITHMS[Algorithm.DYNAMIC] is lcs_dynamic


@pytest.mark.parametrize("name", ["lcs_for", "lcs_rec", "lcs_dynamic"])
def test_from_name(name: str) -> None:
    assert Algorithm.from_name(name).value == name


@pytest.mark.parametrize("name", ["", "lcs", "LCS_FOR", "GREEDY_SCAN", "lcs_dp"])
def test_from_name_rejects_unknown(name: str) -> None:
    with pytest.raises(UnknownAlgorithmError):
        Algorithm.from_name(name)


def test_unknown_algorithm_is_value_error() -> None:
    with pytest.raises(ValueError, match="Invalid algorithm"):
        Algorithm.from_name("bogus")


def test_compute_dispatch() -> None:
    assert compute_lcs_length("ABCBDAB", "BDCABA", Algorithm.DYNAMIC) == 4
    assert compute_lcs_length("ABCBDAB", "BDCABA", Algorithm.RECURSIVE) == 4
    assert compute_lcs_length("AA", "AA", Algorithm.GREEDY_SCAN) == 1


def test_default_is_greedy_scan() -> None:
    assert compute_lcs_length("AA", "AA") == 1


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_empty_for_every_algorithm(algorithm: Algorithm) -> None:
    assert compute_lcs_length("", "anything", algorithm) == 0


def test_benchmark_disabled_still_runs_once() -> None:
    calls = []

    def func() -> int:
        calls.append(1)
        return 7

    result, elapsed = benchmark(func, enabled=False)
    assert result == 7
    assert elapsed is None
    assert len(calls) == 1


def test_benchmark_enabled() -> None:
    calls = []

    def func() -> str:
        calls.append(1)
        return "done"

    result, elapsed = benchmark(func, enabled=True)
    assert result == "done"
    assert isinstance(elapsed, float) and elapsed >= 0
    assert len(calls) == 1


def test_run_untimed() -> None:
    out = run("ABC", "ABC", Algorithm.DYNAMIC)
    assert out == LcsRun(algorithm=Algorithm.DYNAMIC, lcs=3, elapsed=None)


def test_run_timed() -> None:
    out = run("ABC", "ABC", Algorithm.RECURSIVE, timed=True)
    assert out.lcs == 3
    assert out.algorithm is Algorithm.RECURSIVE
    assert out.elapsed is not None and out.elapsed >= 0
