"""
Tests for the searchgraph command line interface.
"""

import pytest

from searchgraph.cli import main


@pytest.fixture
def record_files(tmp_path):
    """Node and arc files for the A,B,C,D scenario."""
    nodes = tmp_path / "nodes.txt"
    arcs = tmp_path / "arcs.txt"
    nodes.write_text("A\nB\nC\nD\n")
    arcs.write_text("0 1 1\n1 2 2\n0 2 5\n2 3 1\n")
    return ["--nodes", str(nodes), "--arcs", str(arcs)]


class TestCommands:
    """Test each subcommand end to end."""

    def test_traverse_bfs(self, record_files, capsys):
        assert main(record_files + ["traverse", "--order", "bfs", "--start", "3"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["Visiting: D", "Visiting: C", "Visiting: B", "Visiting: A"]

    def test_traverse_dfs_directed(self, record_files, capsys):
        assert main(record_files + ["--directed", "traverse", "--order", "dfs"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["Visiting: A", "Visiting: B", "Visiting: C", "Visiting: D"]

    def test_weighted_path(self, record_files, capsys):
        assert main(record_files + ["path", "--start", "0", "--target", "3"]) == 0
        assert capsys.readouterr().out == "[A-D] [4]\nA(0)->B(1)->C(2)->D(1)\n"

    def test_unweighted_path(self, record_files, capsys):
        assert main(record_files + ["path", "--target", "3", "--unweighted"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Trackback: D", "Trackback: C", "Trackback: A",
        ]

    def test_unreachable_path(self, record_files, capsys):
        assert main(record_files + ["--directed", "path", "--start", "3", "--target", "0"]) == 1
        assert "No path" in capsys.readouterr().out

    def test_precompute(self, record_files, capsys):
        assert main(record_files + ["precompute", "--upto", "2"]) == 0
        out = capsys.readouterr().out
        assert out.count("[") == 6
        assert "[A-C] [3]\nA(0)->B(1)->C(2)" in out


class TestErrors:
    """Errors end the program with a non-zero status."""

    def test_missing_file(self, tmp_path):
        args = ["--nodes", str(tmp_path / "missing.txt"), "--arcs", str(tmp_path / "missing.txt")]
        assert main(args + ["traverse"]) == 2

    def test_invalid_handle(self, record_files):
        assert main(record_files + ["path", "--target", "9"]) == 2

    def test_undecodable_file(self, record_files, tmp_path):
        nodes = tmp_path / "nodes.txt"
        nodes.write_bytes(b"A B C \xff\n")
        assert main(record_files + ["traverse"]) == 2

    def test_command_required(self, record_files):
        with pytest.raises(SystemExit):
            main(record_files)
