"""Output directory layout derivation (pure)."""

from __future__ import annotations

from pathlib import Path

from pbdv_wrap.core.models import OutputLayout, RunConfig


def build_layout(config: RunConfig) -> OutputLayout:
    """Derive the sample directory tree for *config*.

    The four parts are joined as strings so that an absolute flowcell,
    panel or sample value still lands under the output root.  No
    existence checks are made; directory creation is a separate step
    owned by the infrastructure layer.
    """
    sample_dir = Path(
        "/".join((
            config.output_path,
            config.flowcell_id,
            config.panel_folder,
            config.sample_id,
        ))
    )
    return OutputLayout(
        sample_dir=sample_dir,
        bam_dir=sample_dir / "bam",
        logs_dir=sample_dir / "logs",
        qc_dir=sample_dir / "QC_stats",
        variants_dir=sample_dir / "variants",
    )
