"""Tests for gen_chart.py: sample chart and file output."""
import pytest
import gen_chart
from gen_chart import build_sample_chart, main, SAMPLE_LABELS
from shared.color import GRAY, WHITE, BLACK

_PNG_SIG = b"\x89PNG\r\n\x1a\n"


class TestSampleChart:
    def test_shape(self):
        chart = build_sample_chart()
        assert chart.edge_count == 6
        assert chart.labels == SAMPLE_LABELS
        assert len(chart.data) == 2

    def test_style(self):
        chart = build_sample_chart()
        assert chart.label_size == 13
        assert chart.label_color == GRAY
        assert chart.label_margin == 10
        assert chart.web_background_color == WHITE
        assert chart.web_edge_color == BLACK
        assert chart.web_edge_stroke_width == 1.5
        assert chart.rotation_angle == 90

    def test_custom_size(self):
        chart = build_sample_chart(300, 200)
        assert (chart.host.width, chart.host.height) == (300, 200)


class TestMain:
    def test_sample_output(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(gen_chart, "_DIR", str(tmp_path))
        assert main([]) == 0
        svg = tmp_path / "spider_chart.svg"
        png = tmp_path / "spider_chart.png"
        assert svg.read_text(encoding="utf-8").startswith("<svg")
        assert png.read_bytes()[:8] == _PNG_SIG
        out = capsys.readouterr().out
        assert "SVG written to" in out
        assert "6 axes, 2 series, 6 labels" in out

    def test_config_file_output(self, tmp_path):
        cfg = tmp_path / "c.yml"
        cfg.write_text("labels: [a, b, c]\nseries:\n  - values: [1, 2, 3]\n", encoding="utf-8")
        out = tmp_path / "out"
        out.mkdir()
        assert main([str(cfg), str(out / "x.svg")]) == 0
        assert (out / "x.svg").exists()
        assert (out / "x.png").exists()

    def test_config_default_output_beside_input(self, tmp_path):
        cfg = tmp_path / "c.yml"
        cfg.write_text("series:\n  - values: [1, 2, 3]\n", encoding="utf-8")
        main([str(cfg)])
        assert (tmp_path / "c.svg").exists()
