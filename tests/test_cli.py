import hashlib

from PIL import Image

from identicon import render_cli

def test_writes_png_and_digest(tmp_path, capsys):
    out = tmp_path / "alice.png"
    rc = render_cli.main(["alice", "-o", str(out), "--size", "30", "--digest"])
    assert rc == 0
    body = out.read_bytes()
    assert capsys.readouterr().out.strip() == hashlib.sha256(body).hexdigest()
    with Image.open(out) as img:
        assert img.size == (30, 30)

def test_same_text_same_file(tmp_path):
    a, b = tmp_path / "a.png", tmp_path / "b.png"
    render_cli.main(["bob", "-o", str(a), "--size", "30", "--transparent"])
    render_cli.main(["bob", "-o", str(b), "--size", "30", "--transparent"])
    assert a.read_bytes() == b.read_bytes()

def test_bad_alpha_exits_2(tmp_path, capsys):
    rc = render_cli.main(["bob", "-o", str(tmp_path / "x.png"), "--alpha", "300"])
    assert rc == 2
    assert "error:" in capsys.readouterr().err
    assert not (tmp_path / "x.png").exists()
