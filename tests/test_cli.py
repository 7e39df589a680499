import io

import pytest

from yuletide import y2022_day01, y2022_day25, y2025_day01
from yuletide.cli import main

CALORIES = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"
ROTATIONS = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n"


def test_single_part_prints_answer(tmp_path, capsys):
    path = tmp_path / "calories.txt"
    path.write_text(CALORIES)
    assert main(["2022", "1", "1", "--input", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [str(y2022_day01.part_one(CALORIES))]


def test_all_parts_in_order(tmp_path, capsys):
    path = tmp_path / "rotations.txt"
    path.write_text(ROTATIONS)
    assert main(["2025", "1", "-i", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        str(y2025_day01.part_one(ROTATIONS)),
        str(y2025_day01.part_two(ROTATIONS)),
    ]


def test_default_input_is_day_file_in_working_directory(tmp_path, monkeypatch, capsys):
    (tmp_path / "1.txt").write_text(ROTATIONS)
    monkeypatch.chdir(tmp_path)
    assert main(["2025", "1", "2"]) == 0
    assert capsys.readouterr().out.strip() == str(y2025_day01.part_two(ROTATIONS))


def test_reads_standard_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1=-0-2\n12111\n"))
    assert main(["2022", "25", "-i", "-"]) == 0
    out = capsys.readouterr().out.strip()
    assert out == y2022_day25.part_one("1=-0-2\n12111\n")
    assert y2022_day25.snafu_to_int(out) == 1747 + 906


def test_day_with_single_part_prints_one_line(tmp_path, capsys):
    path = tmp_path / "25.txt"
    path.write_text("1\n2\n")
    assert main(["2022", "25", "--input", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["1="]


def test_missing_input_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main(["2022", "1", "-i", str(missing)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "cannot read" in captured.err


def test_unknown_puzzle_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["2022", "24"])
    assert excinfo.value.code == 2
    assert "no puzzle" in capsys.readouterr().err


def test_missing_part_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["2022", "25", "2"])
    assert excinfo.value.code == 2
    assert "no part 2" in capsys.readouterr().err


def test_invalid_part_number_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["2022", "1", "3"])
    assert excinfo.value.code == 2


def test_malformed_input_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("X12\n")
    assert main(["2025", "1", "1", "-i", str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "malformed rotation" in captured.err


def test_time_reported_on_standard_error(tmp_path, capsys):
    path = tmp_path / "calories.txt"
    path.write_text(CALORIES)
    assert main(["2022", "1", "2", "-i", str(path), "--time"]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == str(y2022_day01.part_two(CALORIES))
    assert float(captured.err.strip()) >= 0.0