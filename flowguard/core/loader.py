from __future__ import annotations

import json
from pathlib import Path

import structlog
import yaml

from flowguard.models.graph import WorkflowSnapshot

logger = structlog.get_logger()

SNAPSHOT_SUFFIXES = (".json", ".yaml", ".yml")


def load_snapshot(path: Path) -> WorkflowSnapshot:
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        data = json.loads(path.read_text())
    elif suffix in (".yaml", ".yml"):
        data = yaml.safe_load(path.read_text())
    else:
        raise ValueError(f"Unsupported snapshot format '{path.suffix}': {path}")

    if not isinstance(data, dict):
        raise ValueError(f"Snapshot must be a mapping with 'nodes' and 'edges': {path}")

    snapshot = WorkflowSnapshot(**data)
    logger.debug(
        "snapshot.loaded",
        path=str(path),
        node_count=len(snapshot.nodes),
        edge_count=len(snapshot.edges),
    )
    return snapshot


def find_snapshots(directory: Path) -> list[Path]:
    """List snapshot files in a directory, grouped by suffix and sorted by name."""
    paths = []
    for suffix in SNAPSHOT_SUFFIXES:
        paths.extend(sorted(directory.glob(f"*{suffix}")))
    return paths
