"""pbdv-wrap — Parabricks DeepVariant germline pipeline wrapper.

Validates run parameters, builds the standard output directory layout
and launches ``pbrun deepvariant_germline`` with a fixed argument set.
"""

from pbdv_wrap.version import __version__

__all__: list[str] = ["__version__"]
