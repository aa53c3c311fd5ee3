from grafo.cli import main


def test_main_loads_file(tmp_path, capsys):
    path = tmp_path / "graph.edges"
    path.write_text("1 2\n2 3\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert str(path) in out
    assert "loaded successfully" in out


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.edges")]) == 1
    captured = capsys.readouterr()
    assert "Error loading the graph" in captured.err
    assert "loaded successfully" not in captured.out