"""Tests for the analyze-protein command line."""

import csv

import pytest

from analyze_protein.presentation.cli.analyze_protein import main, setup_parser


def test_parser_defaults():
    args = setup_parser().parse_args(["a.pdb", "b.pdb"])

    assert args.paths == ["a.pdb", "b.pdb"]
    assert args.pair_scan == "canonical"
    assert args.max_atoms is None
    assert not args.keep_going
    assert args.verbose == 0


def test_parser_rejects_bad_max_atoms(capsys):
    with pytest.raises(SystemExit):
        setup_parser().parse_args(["--max-atoms", "0", "a.pdb"])
    assert "at least 1" in capsys.readouterr().err


def test_no_arguments(capsys):
    assert main([]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Usage: analyze-protein <pdb1> <pdb2>" in captured.err


def test_single_file(capsys, data_file):
    path = data_file("tetrahedron.pdb")

    assert main([path]) == 0

    assert capsys.readouterr().out.splitlines() == [
        f"PDB file {path}, 4 atoms were read",
        "Cg = 10.000 20.000 30.000",
        "Rg = 1.732",
        "Dmax = 2.828",
    ]


def test_files_in_command_line_order(capsys, data_file):
    first = data_file("single_atom.pdb")
    second = data_file("tetrahedron.pdb")

    assert main([first, second, "--pair-scan", "legacy"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"PDB file {first}, 1 atoms were read",
        "Cg = 11.104 13.207 10.112",
        "Rg = 0.000",
        "Dmax = 0.000",
        f"PDB file {second}, 4 atoms were read",
        "Cg = 10.000 20.000 30.000",
        "Rg = 1.732",
        "Dmax = 2.828",
    ]


def test_malformed_record_stops_run(capsys, data_file):
    ok = data_file("tetrahedron.pdb")
    bad = data_file("short_record.pdb")
    never = data_file("single_atom.pdb")

    assert main([ok, bad, never]) == 1

    captured = capsys.readouterr()
    assert f"PDB file {ok}, 4 atoms were read" in captured.out
    assert never not in captured.out
    assert "ATOM line is too short 54 characters" in captured.err
    assert f"({bad}, line 2)" in captured.err


def test_coordinate_error(capsys, data_file):
    assert main([data_file("bad_coordinate.pdb")]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error in coordinate conversion abcdefgh" in captured.err


def test_empty_file(capsys, data_file):
    path = data_file("no_atoms.pdb")

    assert main([path]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"Error - 0 atoms were found in the file {path}" in captured.err


def test_missing_file(capsys, tmp_path):
    path = str(tmp_path / "missing.pdb")

    assert main([path]) == 1
    assert f"Error opening file: {path}" in capsys.readouterr().err


def test_keep_going(capsys, data_file, tmp_path):
    missing = str(tmp_path / "missing.pdb")
    bad = data_file("bad_coordinate.pdb")
    ok = data_file("tetrahedron.pdb")

    assert main(["--keep-going", missing, bad, ok]) == 1

    captured = capsys.readouterr()
    assert captured.out.splitlines()[0] == f"PDB file {ok}, 4 atoms were read"
    assert "Error opening file" in captured.err
    assert "Error in coordinate conversion" in captured.err
    assert "2 of 3 files failed" in captured.err


def test_keep_going_all_ok(data_file):
    assert main(["--keep-going", data_file("tetrahedron.pdb")]) == 0


def test_max_atoms(capsys, data_file):
    assert main(["--max-atoms", "2", data_file("tetrahedron.pdb")]) == 1
    assert "More than 2 atoms" in capsys.readouterr().err


def test_csv_summary(tmp_path, data_file):
    csv_path = tmp_path / "out" / "summary.csv"

    assert main(["--csv", str(csv_path), data_file("tetrahedron.pdb"), data_file("single_atom.pdb")]) == 0

    with open(csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [row["atoms"] for row in rows] == ["4", "1"]
    assert rows[0]["cg_z"] == "30.000"
    assert rows[0]["rg"] == "1.732"
    assert rows[0]["dmax"] == "2.828"
    assert rows[1]["file"] == data_file("single_atom.pdb")


def test_csv_write_failure(capsys, tmp_path, data_file):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    assert main(["--csv", str(blocker / "summary.csv"), data_file("tetrahedron.pdb")]) == 1
    assert "Error saving CSV file" in capsys.readouterr().err


def test_timing_report(capsys, data_file):
    assert main(["--timing", data_file("tetrahedron.pdb")]) == 0

    err = capsys.readouterr().err
    for stage in ("read", "center_of_gravity", "radius_of_gyration", "max_distance"):
        assert f"{stage}: Total:" in err


def test_progress_keeps_stdout_clean(capsys, data_file):
    assert main(["--progress", data_file("tetrahedron.pdb")]) == 0

    captured = capsys.readouterr()
    assert captured.out.splitlines()[1] == "Cg = 10.000 20.000 30.000"
    assert "Analyzing" in captured.err


def test_log_file(tmp_path, data_file):
    log_file = tmp_path / "logs" / "run.log"

    assert main(["-vv", "--log-file", str(log_file), data_file("tetrahedron.pdb")]) == 0

    content = log_file.read_text()
    assert "INFO - Processing" in content
    assert "DEBUG - Read 4 atom records" in content


def test_verbose_logs_to_stderr(capsys, data_file):
    assert main(["-v", data_file("tetrahedron.pdb")]) == 0

    err = capsys.readouterr().err
    assert "Processing" in err
    assert "Read 4 atom records" not in err


if __name__ == "__main__":
    pytest.main([__file__])
