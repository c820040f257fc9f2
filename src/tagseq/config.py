"""Record-writer defaults, loadable from YAML, TOML, JSON or the environment."""

from __future__ import annotations

import dataclasses
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .constants import (
    FASTA_LINE_WIDTH, FASTQ_LINE_WIDTH, DEFAULT_ID, DEFAULT_DESCRIPTION,
    QUALITY_FILLER, COMPRESS_LEVEL,
)


@dataclass
class WriterConfig:
    """Defaults used by the FASTA/FASTQ writers."""

    fasta_line_width: int = FASTA_LINE_WIDTH
    fastq_line_width: int = FASTQ_LINE_WIDTH
    default_id: str = DEFAULT_ID
    default_description: str = DEFAULT_DESCRIPTION
    quality_filler: str = QUALITY_FILLER
    compresslevel: int = COMPRESS_LEVEL

    def __post_init__(self) -> None:
        if self.fasta_line_width < 0 or self.fastq_line_width < 0:
            raise ValueError("line widths must be >= 0 (0 disables wrapping)")
        if len(self.quality_filler) != 1:
            raise ValueError(
                f"quality_filler must be one character, got {self.quality_filler!r}"
            )
        if not 0 <= self.compresslevel <= 9:
            raise ValueError(f"compresslevel must be 0-9, got {self.compresslevel}")

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> WriterConfig:
        """Build from a dict of field values::

            WriterConfig.from_config({"fasta_line_width": 60})
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ValueError(
                f"Unknown writer setting(s): {', '.join(unknown)}. "
                f"Expected any of: {', '.join(sorted(known))}"
            )
        return cls(**config)

    @classmethod
    def from_env(cls, prefix: str = "TAGSEQ") -> WriterConfig:
        """Build from ``{PREFIX}_{FIELD}`` environment variables::

            # TAGSEQ_FASTA_LINE_WIDTH=60  TAGSEQ_DEFAULT_ID=read
            WriterConfig.from_env()
        """
        values: dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            raw = os.environ.get(f"{prefix}_{f.name.upper()}")
            if raw is None:
                continue
            values[f.name] = int(raw) if f.type in (int, 'int') else raw
        return cls(**values)


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a configuration dict from a file, dispatched by extension.

    Supported extensions: ``.json``, ``.toml``, ``.yaml`` / ``.yml``.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == '.json':
        with open(path) as f:
            return json.load(f)

    if suffix == '.toml':
        return _load_toml(path)

    if suffix in ('.yaml', '.yml'):
        return _load_yaml(path)

    raise ValueError(
        f"Unsupported config file extension {suffix!r}. "
        "Use .json, .toml, .yaml, or .yml."
    )


def writer_config_from_file(path: str | Path, section: str | None = None) -> WriterConfig:
    """Load a :class:`WriterConfig` from a config file.

    If *section* is given, settings are read from that top-level key.
    """
    data = load_config(path)
    if section is not None:
        data = data.get(section, {})
    return WriterConfig.from_config(data)


# ── Internal loaders ─────────────────────────────────────────────

def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML using ``tomllib`` (3.11+) or ``tomli``."""
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            raise ImportError(
                "TOML support requires Python 3.11+ (built-in tomllib) "
                "or the 'tomli' package. Install with: pip install tagseq[toml]"
            )
    with open(path, 'rb') as f:
        return tomllib.load(f)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML using ``pyyaml``."""
    try:
        import yaml
    except ModuleNotFoundError:
        raise ImportError(
            "YAML support requires the 'pyyaml' package. "
            "Install with: pip install tagseq[yaml]"
        )
    with open(path) as f:
        return yaml.safe_load(f) or {}
