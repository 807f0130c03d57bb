"""Run bookkeeping: identifiers, artifact directories and JSON output."""

from __future__ import annotations

import json
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

DATA_DIR_NAME = "data"
LOG_FILENAME = "signup_check.log"


@dataclass(slots=True)
class RunPaths:
    """Layout of one run: ``<data>/<run_id>/<step>/``.

    The log sits at the run level so several steps of one run share it;
    screenshots and the JSON summary live in the step directory.
    """

    run_id: str
    step_name: str
    base_dir: Path
    step_dir: Path

    @property
    def log_path(self) -> Path:
        return self.base_dir / LOG_FILENAME

    @property
    def summary_path(self) -> Path:
        return self.step_dir / f"{self.step_name}.json"

    def artifact(self, filename: str) -> Path:
        path = self.step_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    def relative(self, path: Path) -> str:
        """Artifact path as listed in the run summary, relative to the run directory."""
        try:
            return path.resolve().relative_to(self.base_dir.resolve()).as_posix()
        except ValueError:
            return str(path.resolve())


def generate_run_id() -> str:
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return f"{timestamp}-{secrets.token_hex(2)}"


def prepare_run_directories(
    run_id: str, step_name: str, data_dir: Optional[Path] = None
) -> RunPaths:
    """Create the run and step directories under ``data_dir`` (default ``./data``)."""
    base_dir = (data_dir or Path.cwd() / DATA_DIR_NAME) / run_id
    step_dir = base_dir / step_name
    step_dir.mkdir(parents=True, exist_ok=True)
    return RunPaths(run_id=run_id, step_name=step_name, base_dir=base_dir, step_dir=step_dir)


def write_json(path: Path, payload: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    # Paths and enums end up in summaries; render them as text.
    path.write_text(
        json.dumps(payload, indent=2, ensure_ascii=False, default=str) + "\n",
        encoding="utf-8",
    )
    return path
