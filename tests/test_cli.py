"""
Tests for the command-line interface.
"""

from __future__ import annotations

import logging

import pytest
from PIL import Image

from kenkya_branding.cli import create_parser, main


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logging.getLogger("kenkya_branding").handlers.clear()


class TestCli:
    """Tests for the kenkya-branding subcommands."""

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 0
        assert "kenkya-branding" in capsys.readouterr().out

    def test_info(self, capsys):
        main(["info", "#1e90ff", "oops"])
        out = capsys.readouterr().out
        assert "#1E90FF" in out
        assert "210°" in out
        assert "invalid, shown as black" in out

    def test_variations(self, capsys):
        main(["variations", "#E91E63, #2196F3"])
        out = capsys.readouterr().out
        assert "ORIGINAL" in out
        assert "VIBRANT" in out
        assert "SOFT" in out
        assert "#E91E63" in out

    def test_empty_palette_exits_with_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["variations", " , "])
        assert exc.value.code == 1
        assert "Palette is empty" in capsys.readouterr().err

    def test_extract(self, tmp_path, capsys):
        logo = tmp_path / "logo.png"
        Image.new("RGB", (30, 30), (33, 150, 243)).save(logo)

        main(["extract", str(logo)])

        out = capsys.readouterr().out
        assert "#2196F3" in out
        assert "Stored as: #2196F3" in out

    def test_extract_blank_logo(self, tmp_path, capsys):
        logo = tmp_path / "blank.png"
        Image.new("RGB", (30, 30), (255, 255, 255)).save(logo)

        main(["extract", str(logo)])

        assert "No colors detected" in capsys.readouterr().out

    def test_guide(self, tmp_path, capsys):
        output = tmp_path / "guide.pdf"
        main(["guide", "#E91E63, #2196F3", "--name", "Padaria Central", "-o", str(output)])

        assert output.read_bytes().startswith(b"%PDF")
        assert str(output) in capsys.readouterr().out

    def test_config_init_and_show(self, tmp_path, capsys):
        path = tmp_path / "branding.yaml"
        main(["config", "init", str(path)])
        assert path.exists()

        main(["--config", str(path), "config", "show"])
        assert "sample_stride: 4" in capsys.readouterr().out

    def test_parser_requires_guide_name(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["guide", "#E91E63"])
