import csv
import json
from pathlib import Path

import pytest

from wordsim.harness import AttemptsHistogram, CaseResult, Status
from wordsim.harness.io import format_histogram, write_csv, write_histogram_csv, write_manifest


def _hist():
    h = AttemptsHistogram(6)
    h.update([0, 0, 3, 3, 3, 3, 4, 4, 4, 4])
    return h


def test_counts_are_dense():
    assert _hist().counts() == {0: 2, 1: 0, 2: 0, 3: 4, 4: 4, 5: 0, 6: 0}
    assert _hist().total == 10
    assert _hist().failures == 2


def test_average_with_and_without_failures():
    h = _hist()
    assert h.average() == pytest.approx(2.8)
    assert h.average(include_failures=False) == pytest.approx(3.5)
    assert AttemptsHistogram(6).average() == 0.0


def test_merge_is_commutative():
    a = AttemptsHistogram(6, {1: 2, 0: 1})
    b = AttemptsHistogram(6, {1: 1, 5: 3})
    ab = AttemptsHistogram(6).merge(a).merge(b)
    ba = AttemptsHistogram(6).merge(b).merge(a)
    assert ab == ba
    assert ab.counts()[1] == 3 and ab.total == 7


def test_out_of_range_rejected():
    h = AttemptsHistogram(6)
    with pytest.raises(ValueError):
        h.record(7)
    with pytest.raises(ValueError):
        h.record(-1)
    with pytest.raises(ValueError):
        h.merge(AttemptsHistogram(5))


def test_write_histogram_csv(tmp_path: Path):
    out = write_histogram_csv(_hist(), str(tmp_path / "out" / "hist.csv"))
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows == [["0", "1", "2", "3", "4", "5", "6"], ["2", "0", "0", "4", "4", "0", "0"]]


def test_format_histogram():
    s = format_histogram(_hist())
    assert "average attempts: 2.8000" in s
    assert "failures=2" in s
    assert "3.5000" in format_histogram(_hist(), include_failures=False)


def test_write_csv_and_manifest(tmp_path: Path):
    results = [
        CaseResult("crane", Status.SOLVED, 2, [("raise", "YY--G"), ("crane", "GGGGG")], 1.23, "expected_info"),
        CaseResult("zzzzz", Status.EXHAUSTED, 0, [("apple", "-----")], 0.5, "expected_info"),
    ]
    p = write_csv(results, str(tmp_path / "games.csv"), max_tries=6, N=5)
    with open(p, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["solution"] == "crane" and rows[0]["attempts"] == "2"
    assert rows[0]["patt_1"] == "'YY--G"
    assert rows[1]["status"] == "exhausted" and rows[1]["guess_2"] == ""

    m = write_manifest({"run_id": "x", "histogram": _hist().counts()}, str(tmp_path / "m.json"))
    data = json.loads(Path(m).read_text(encoding="utf-8"))
    assert data["run_id"] == "x"
