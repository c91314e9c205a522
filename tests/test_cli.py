from PIL import Image

from glyphpack.cli import main


def test_list_presets(capsys):
    assert main(["--list-presets"]) == 0
    out = capsys.readouterr().out
    assert "legacy-font:" in out
    assert "bitmap:" in out


def test_compile_legacy_font(tmp_path, capsys):
    source = tmp_path / "font.png"
    output = tmp_path / "font.bin"
    img = Image.new("RGB", (96, 64), (0, 0, 0))
    img.putpixel((0, 0), (255, 255, 255))
    img.save(source)
    assert main([str(source), str(output), "--preset", "legacy-font"]) == 0
    data = output.read_bytes()
    assert len(data) == 128 * 8
    assert data[0] == 0x01
    assert "Wrote 1024 bytes" in capsys.readouterr().out


def test_tile_size_and_grid_overrides(tmp_path):
    source = tmp_path / "tiles.png"
    output = tmp_path / "tiles.bin"
    Image.new("RGB", (8, 4), (9, 9, 9)).save(source)
    args = [str(source), str(output), "--tile-size", "4x4", "--columns", "2", "--rows", "1"]
    args += ["--margin", "0", "--padding", "0", "--count", "2", "--invert", "-q"]
    assert main(args) == 0
    assert output.read_bytes() == b"\x0f" * 8


def test_dimension_error_writes_nothing(tmp_path, capsys):
    source = tmp_path / "font.png"
    output = tmp_path / "font.bin"
    Image.new("RGB", (95, 64)).save(source)
    assert main([str(source), str(output), "--preset", "legacy-font"]) == 2
    assert not output.exists()
    err = capsys.readouterr().err
    assert "width" in err
    assert "96" in err


def test_missing_paths(capsys):
    assert main([]) == 2
    assert "Missing input" in capsys.readouterr().err


def test_unknown_preset(tmp_path, capsys):
    source = tmp_path / "x.png"
    Image.new("RGB", (1, 1)).save(source)
    assert main([str(source), str(tmp_path / "x.bin"), "--preset", "nope"]) == 2
    assert "Unknown preset" in capsys.readouterr().err


def test_presets_from_environment(tmp_path, monkeypatch, capsys):
    presets = tmp_path / "mine.json"
    presets.write_text('[{"name": "mine", "mode": "stride", "policy": "threshold"}]', encoding="utf-8")
    monkeypatch.setenv("GLYPHPACK_PRESETS", str(presets))
    assert main(["--list-presets"]) == 0
    assert capsys.readouterr().out.strip() == "mine"
