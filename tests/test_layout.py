"""Tests for output layout derivation (core/layout.py)."""

from __future__ import annotations

from pathlib import Path

from pbdv_wrap.core.layout import build_layout
from pbdv_wrap.core.models import RunConfig


def _make_config(**overrides: object) -> RunConfig:
    defaults: dict[str, object] = {
        "output_path": "/out",
        "panel_folder": "PANEL",
        "flowcell_id": "FC1",
        "sample_id": "S1",
        "reference_sequence": "/ref.fasta",
    }
    defaults.update(overrides)
    return RunConfig(**defaults)  # type: ignore[arg-type]


class TestBuildLayout:
    def test_sample_dir_nesting(self) -> None:
        layout = build_layout(_make_config())
        assert layout.sample_dir == Path("/out/FC1/PANEL/S1")

    def test_subdirectories(self) -> None:
        layout = build_layout(_make_config())
        assert layout.bam_dir == Path("/out/FC1/PANEL/S1/bam")
        assert layout.logs_dir == Path("/out/FC1/PANEL/S1/logs")
        assert layout.qc_dir == Path("/out/FC1/PANEL/S1/QC_stats")
        assert layout.variants_dir == Path("/out/FC1/PANEL/S1/variants")

    def test_trailing_slash_on_output_root(self) -> None:
        layout = build_layout(_make_config(output_path="/out/"))
        assert layout.sample_dir == Path("/out/FC1/PANEL/S1")

    def test_relative_output_root_stays_relative(self) -> None:
        layout = build_layout(_make_config(output_path="results"))
        assert layout.bam_dir == Path("results/FC1/PANEL/S1/bam")

    def test_does_not_touch_filesystem(self, tmp_path: Path) -> None:
        build_layout(_make_config(output_path=str(tmp_path / "out")))
        assert not (tmp_path / "out").exists()

    def test_flags_do_not_affect_layout(self) -> None:
        plain = build_layout(_make_config())
        flagged = build_layout(
            _make_config(wes_mode=True, low_memory=True, gpackage_path="/g"),
        )
        assert plain == flagged

    def test_absolute_flowcell_stays_under_output_root(self) -> None:
        layout = build_layout(_make_config(flowcell_id="/tmp/FC1"))
        assert layout.sample_dir == Path("/out/tmp/FC1/PANEL/S1")
        assert str(layout.sample_dir).startswith("/out/")

    def test_absolute_panel_and_sample_stay_under_output_root(self) -> None:
        layout = build_layout(_make_config(panel_folder="/PANEL", sample_id="/S1"))
        assert layout.variants_dir == Path("/out/FC1/PANEL/S1/variants")
