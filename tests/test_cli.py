"""Tests for the command line driver."""

import json

import pytest

from socialgraph.cli import build_graph, main
from socialgraph.config import RunConfig
from socialgraph.core.exceptions import SourceReadError


@pytest.fixture
def subreddits_csv(tmp_path):
    """Fixture providing a subreddit export including names outside the example data."""
    path = tmp_path / "subreddits.csv"
    path.write_text("name,x0\naskreddit,0.1\npics,0.2\n", encoding="utf-8")
    return path


def test_build_graph_default():
    """Test the default build contains only the example data."""
    graph = build_graph(RunConfig())

    assert len(graph) == 10
    assert graph.get_edge_count() == 5


def test_build_graph_with_sources(subreddits_csv):
    """Test fixtures and CSV sources are combined."""
    config = RunConfig(
        csv_paths=(str(subreddits_csv),),
        fixture='{"edges": [["pics", "rotoreuters"]]}',
    )
    graph = build_graph(config)

    assert "pics" in graph
    assert graph.degrees_of_separation("askreddit", "pics") == 2


def test_build_graph_missing_csv(tmp_path):
    """Test a missing CSV source is propagated."""
    with pytest.raises(SourceReadError):
        build_graph(RunConfig(csv_paths=(str(tmp_path / "missing.csv"),)))


def test_run_command(tmp_path, capsys):
    """Test the full run prints the report and writes the DOT file."""
    output = tmp_path / "graph.dot"

    assert main(["run", "--output", str(output)]) == 0

    out = capsys.readouterr().out
    assert "Degrees of separation between rotoreuters and askreddit: 1" in out
    assert "No path found between rotoreuters and fireteams" in out
    assert "No path found between fireteams and funny" in out
    assert f"Graph saved to {output}" in out
    dot = output.read_text(encoding="utf-8")
    assert '"askreddit" -> "rotoreuters";' in dot
    assert '"rotoreuters" -> "askreddit";' in dot


def test_run_with_queries(tmp_path, capsys):
    """Test --query replaces the default report nodes."""
    assert main(["run", "--output", "-", "--query", "funny", "--query", "unremovable"]) == 0

    out = capsys.readouterr().out
    assert "Degrees of separation between funny and unremovable: 1" in out
    assert "askreddit and" not in out
    assert out.rstrip().endswith("}")


def test_query_command(capsys):
    """Test a single separation query."""
    assert main(["query", "askreddit", "rotoreuters"]) == 0
    assert capsys.readouterr().out == "Degrees of separation between askreddit and rotoreuters: 1\n"

    assert main(["query", "askreddit", "funny"]) == 0
    assert capsys.readouterr().out == "No path found between askreddit and funny\n"


def test_export_to_stdout_without_example(capsys):
    """Test exporting only a JSON fixture, with isolated nodes declared."""
    fixture = json.dumps({"nodes": ["lonely"], "edges": [["A", "B"]]})

    assert main(["export", "--no-example", "--fixture", fixture, "--output", "-", "--include-isolated"]) == 0

    assert capsys.readouterr().out == (
        "digraph G {\n" '    "lonely";\n' '    "A" -> "B";\n' '    "B" -> "A";\n' "}\n"
    )


def test_config_file(tmp_path, capsys, subreddits_csv):
    """Test settings read from a configuration file."""
    config = tmp_path / "config.json"
    config.write_text(
        json.dumps(
            {
                "csv_paths": [str(subreddits_csv)],
                "use_example_fixture": False,
                "query_nodes": ["askreddit", "pics"],
                "output_path": "-",
            }
        ),
        encoding="utf-8",
    )

    assert main(["run", "--config", str(config)]) == 0

    out = capsys.readouterr().out
    assert "['askreddit', 'pics']" in out
    assert "No path found between askreddit and pics" in out


def test_missing_csv_exits_with_error(tmp_path, caplog):
    """Test boundary failures give exit status 1."""
    assert main(["run", "--csv", str(tmp_path / "missing.csv"), "--output", "-"]) == 1
    assert "Cannot read" in caplog.text


def test_unwritable_output(tmp_path):
    """Test an export failure gives exit status 1."""
    assert main(["export", "--output", str(tmp_path / "missing" / "graph.dot")]) == 1


def test_no_command(capsys):
    """Test running without a command prints usage."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
