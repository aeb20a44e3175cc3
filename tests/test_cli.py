import io

import pytest
from PIL import Image as PILImage

from asciiart.cli import main


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "half.png"
    img = PILImage.new("RGB", (16, 16), (0, 0, 0))
    img.paste((255, 255, 255), (8, 0, 16, 16))
    img.save(path)
    return path


def test_render_once(image_path, capsys):
    main([str(image_path), "--render", "-c", " @"])
    out = capsys.readouterr().out
    assert out == " @\n @\n"


def test_render_html(image_path, tmp_path):
    html_path = tmp_path / "art.html"
    main([str(image_path), "--render", "-c", " @", "-o", "html", "--html-file", str(html_path)])
    assert " @\n @" in html_path.read_text(encoding="utf-8")


def test_render_charset_too_small(image_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(image_path), "--render", "-c", "@"])
    assert exc.value.code == 1
    assert "Charset is too small" in capsys.readouterr().err


def test_missing_image(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.png")])
    assert exc.value.code == 1
    assert "Error loading image" in capsys.readouterr().err


def test_invalid_resolution(image_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(image_path), "-r", "0"])
    assert exc.value.code == 2


def test_interactive_shell(image_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("chars\nres up\nexit\n"))
    main([str(image_path)])
    out = capsys.readouterr().out
    assert "0 1 2 3 4 5 6 7 8 9" in out
    assert "Resolution set to 4." in out


def test_non_power_of_two_resolution_rejected(image_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(image_path), "-r", "3", "--render"])
    assert exc.value.code == 2
    assert "power of two" in capsys.readouterr().err


def test_wide_image_at_default_resolution(tmp_path, capsys):
    path = tmp_path / "wide.png"
    PILImage.new("RGB", (64, 16), (0, 0, 0)).save(path)
    main([str(path), "--render", "-c", " @"])
    assert capsys.readouterr().out == "    \n"
