from pathlib import Path

from titanic_eda.main import build_parser, config_from_args, main


def test_defaults():
    config = config_from_args(build_parser().parse_args([]))
    assert config.data_path == Path("data") / "train.csv"
    assert config.output_dir == Path("docs") / "plots"
    assert config.make_plots
    assert not config.show_plots
    assert config.log_level == "WARNING"


def test_verbosity():
    assert config_from_args(build_parser().parse_args(["-v"])).log_level == "INFO"
    assert config_from_args(build_parser().parse_args(["-vv"])).log_level == "DEBUG"


def test_missing_file_exits_with_error(tmp_path, capsys):
    code = main([str(tmp_path / "missing.csv"), "--no-plots"])

    assert code == 1
    out = capsys.readouterr().out
    assert "Error: File not found" in out
    assert "DATASET OVERVIEW" not in out


def test_schema_error_exits_with_error(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_text("Survived,Name\n1,\"Smith, Mrs. Jane\"\n", encoding="utf-8")

    assert main([str(path), "--no-plots"]) == 1
    assert "Required column(s) missing" in capsys.readouterr().out


def test_tables_only_run(titanic_csv, tmp_path, capsys):
    plots = tmp_path / "plots"
    code = main([str(titanic_csv), "--no-plots", "--output-dir", str(plots)])

    assert code == 0
    out = capsys.readouterr().out
    assert "Loaded 11 records" in out
    assert "The most important factor contributing to passenger death was Gender." in out
    assert not plots.exists()


def test_full_run_saves_charts(titanic_csv, tmp_path, capsys):
    plots = tmp_path / "plots"
    assert main([str(titanic_csv), "--output-dir", str(plots)]) == 0

    assert len(list(plots.glob("*.png"))) == 7
    assert "Saved 7 chart(s)" in capsys.readouterr().out
