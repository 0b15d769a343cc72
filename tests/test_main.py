"""Tests for the command line entry point."""

import pytest

from src.main import CONNECTIONS_FILE, main

CSV_CONTENT = """From,To,Line,Time (mins)
A,B,Red,5
B,C,Red,3
B,C,Blue,10
A,C,Blue,1
D,E,Green,2
B,C,Blue,oops
"""


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "connections.csv"
    path.write_text(CSV_CONTENT, encoding="utf-8")
    return path


class TestMain:
    """Tests for main()."""

    def test_fastest_route(self, csv_file, capsys):
        assert main(["A", "B", "--connections", str(csv_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("*** Minimal Time Route ***")
        assert "Overall Journey Time (mins) = 5.0" in out

    def test_fewest_changes(self, csv_file, capsys):
        code = main(["A", "C", "--mode", "changes", "--connections", str(csv_file)])
        assert code == 0
        out = capsys.readouterr().out
        assert out.startswith("*** Route with Fewest Changes ***")
        assert "A on Blue line\nC on Blue line" in out
        assert "Number of Changes = 0" in out

    def test_custom_change_time(self, tmp_path, capsys):
        path = tmp_path / "change.csv"
        path.write_text("From,To,Line,Time\nA,B,Red,5\nB,C,Blue,10\n", encoding="utf-8")
        assert main(["A", "C", "--change-time", "4", "--connections", str(path)]) == 0
        assert "Overall Journey Time (mins) = 19.0" in capsys.readouterr().out

    def test_no_route(self, csv_file, capsys):
        assert main(["A", "E", "--connections", str(csv_file)]) == 0
        assert capsys.readouterr().out.strip() == "No route found."

    def test_warns_about_skipped_rows(self, csv_file, capsys):
        main(["A", "B", "--connections", str(csv_file)])
        err = capsys.readouterr().err
        assert "skipped 1 malformed row(s)" in err
        assert "lines 7" in err

    def test_same_station(self, csv_file, capsys):
        assert main(["A", "A", "--connections", str(csv_file)]) == 1
        assert "can't be the same" in capsys.readouterr().err

    def test_unknown_station(self, csv_file, capsys):
        assert main(["A", "Z", "--connections", str(csv_file)]) == 1
        assert "Unknown end station: Z" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["A", "B", "--connections", str(tmp_path / "nope.csv")]) == 1
        assert "Problem reading CSV" in capsys.readouterr().err

    def test_oversized_field(self, tmp_path, capsys):
        path = tmp_path / "huge.csv"
        path.write_text(
            "From,To,Line,Time\n" + "A" * 200_000 + ",B,Red,3\n", encoding="utf-8"
        )
        assert main(["A", "B", "--connections", str(path)]) == 1
        assert "Problem reading CSV" in capsys.readouterr().err

    def test_negative_change_time(self, csv_file, capsys):
        assert main(["A", "B", "--change-time", "-1", "--connections", str(csv_file)]) == 1

    def test_list_stations(self, csv_file, capsys):
        assert main(["--list-stations", "--connections", str(csv_file)]) == 0
        assert capsys.readouterr().out.split("\n")[:5] == ["A", "B", "C", "D", "E"]

    def test_list_stations_missing_file(self, tmp_path, capsys):
        assert main(["--list-stations", "--connections", str(tmp_path / "nope.csv")]) == 1
        assert "Problem reading CSV" in capsys.readouterr().err

    def test_missing_goal(self, csv_file):
        with pytest.raises(SystemExit):
            main(["A", "--connections", str(csv_file)])

    def test_invalid_mode(self, csv_file):
        with pytest.raises(SystemExit):
            main(["A", "B", "--mode", "scenic", "--connections", str(csv_file)])


@pytest.mark.skipif(not CONNECTIONS_FILE.exists(), reason="Sample network not available")
class TestSampleNetwork:
    """Tests against the bundled sample network."""

    def test_bury_to_altrincham(self, capsys):
        assert main(["Bury", "Altrincham"]) == 0
        out = capsys.readouterr().out
        assert "Overall Journey Time (mins) = 49.0" in out
        assert "Number of Changes = 1" in out

    def test_fewest_changes_to_airport(self, capsys):
        assert main(["Piccadilly", "Manchester Airport", "--mode", "changes"]) == 0
        out = capsys.readouterr().out
        assert "Manchester Airport on Red line" in out
