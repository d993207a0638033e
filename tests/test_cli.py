import json

import pytest

from contrastgrid.main import main


def run_cli(capsys, *argv):
    with pytest.raises(SystemExit) as exc:
        main(list(argv))
    out, err = capsys.readouterr()
    return exc.value.code, out, err


def test_check_json(capsys):
    code, out, _ = run_cli(capsys, "check", "-fg", "#000", "-bg", "rgb(255, 255, 255)", "--json")
    assert code == 0
    data = json.loads(out)
    assert data["foreground"] == "#000000"
    assert data["background"] == "#FFFFFF"
    assert data["ratio_string"] == "21:1"
    assert data["level"] == "AAA"
    assert data["meets_aa"] is True


def test_check_large_text(capsys):
    code, out, _ = run_cli(capsys, "check", "-fg", "#FF0000", "-bg", "#FFFFFF", "-t", "large", "--json")
    assert code == 0
    assert json.loads(out)["level"] == "AA"


def test_check_renders_text(capsys):
    code, out, _ = run_cli(capsys, "check", "-fg", "#FF0000=Brand red", "-bg", "#FFF")
    assert code == 0
    assert "4:1" in out
    assert "Large text only (AA)" in out
    assert "Brand red" in out


def test_invalid_color_exits_with_usage_error(capsys):
    code, _, err = run_cli(capsys, "check", "-fg", "rgb(256,0,0)", "-bg", "#FFF")
    assert code == 2
    assert "invalid color value" in err


def test_matrix_json_with_all_filters(capsys):
    code, out, _ = run_cli(
        capsys, "matrix",
        "-c", "#FF0000=Red", "-c", "#00FF00=Green", "-c", "#0000FF=Blue",
        "-f", "aaa,aa,aa-large,failed", "--json",
    )
    assert code == 0
    data = json.loads(out)
    assert [c["label"] for c in data["colors"]] == ["Red", "Green", "Blue"]
    assert len(data["matrix"]) == 3
    assert data["matrix"][0][0]["ratio"] == 1
    assert data["summary"]["total"] == 9


def test_matrix_default_filters_hide_failures(capsys):
    code, out, _ = run_cli(capsys, "matrix", "-c", "#FF0000", "-c", "#00FF00", "-c", "#0000FF", "--json")
    assert code == 0
    data = json.loads(out)
    assert data["matrix"][0][0] is None
    assert data["matrix"][1][2]["level"] == "AA"


def test_matrix_json_summary_counts_hidden_cells(capsys):
    code, out, _ = run_cli(capsys, "matrix", "-c", "#000000", "-c", "#FFFFFF", "--json")
    assert code == 0
    data = json.loads(out)
    assert data["matrix"][0][0] is None
    assert data["summary"]["total"] == 4
    assert data["summary"]["DNP"] == 2
    assert data["summary"]["AAA"] == 2


def test_matrix_renders_summary(capsys):
    code, out, _ = run_cli(capsys, "matrix", "-c", "#000000=Ink", "-c", "#FFFFFF=Paper")
    assert code == 0
    assert "FG \\ BG" in out
    assert "4 color combinations: 2 pass AA or better, 0 pass for large text only, 2 fail." in out


def test_matrix_needs_two_colors(capsys):
    code, out, err = run_cli(capsys, "matrix", "-c", "#000000")
    assert code == 0
    assert "at least 2 colors" in err


def test_matrix_rejects_unknown_filter(capsys):
    code, _, err = run_cli(capsys, "matrix", "-c", "#000", "-c", "#FFF", "-f", "gold")
    assert code == 2
    assert "invalid grid filter" in err


def test_sort_json(capsys):
    code, out, _ = run_cli(
        capsys, "sort", "-c", "#FFFFFF", "-c", "#000000", "-c", "#808080",
        "-b", "luminance", "-d", "descending", "--scores", "--json",
    )
    assert code == 0
    data = json.loads(out)
    assert [c["hex"] for c in data["colors"]] == ["#000000", "#808080", "#FFFFFF"]
    assert data["title"] == "↓ Luminance (darkest first)"
    assert data["colors"][0]["score"] == "0.0000"


def test_sort_manual_by_default(capsys):
    code, out, _ = run_cli(capsys, "sort", "-c", "#FFFFFF=b", "-c", "#000000=a")
    assert code == 0
    assert "Manual Order" in out
    assert out.index("#FFFFFF") < out.index("#000000")


def test_sort_rejects_unknown_criteria(capsys):
    code, _, err = run_cli(capsys, "sort", "-c", "#FFF", "-b", "rainbow")
    assert code == 2
    assert "invalid choice" in err


def test_missing_command(capsys):
    code, _, err = run_cli(capsys)
    assert code == 2
    assert "a command is required" in err


def test_unknown_command(capsys):
    code, _, err = run_cli(capsys, "paint")
    assert code == 2
    assert "unrecognized command: 'paint'" in err


def test_version(capsys):
    code, out, _ = run_cli(capsys, "--version")
    assert code == 0
    assert out.startswith("contrastgrid ")
