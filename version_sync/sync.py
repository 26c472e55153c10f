"""Copy the version of one configuration record into another."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from version_sync.records import load_record, load_source_version, write_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncResult:
    """Outcome of a single synchronization run."""

    source_path: Path
    target_path: Path
    previous_version: str | None
    version: str
    written: bool

    @property
    def changed(self) -> bool:
        """Whether the target version differed from the source version."""
        return self.previous_version != self.version


def synchronize_version(
    source_path: Path | str,
    target_path: Path | str,
    *,
    indent: int = 2,
    dry_run: bool = False,
) -> SyncResult:
    """Set the target record's ``version`` to the source record's ``version``.

    Both files are read before anything is written, so a failure while
    reading either one leaves the target untouched. The target is rewritten
    in full even when its version already matches; every other field keeps
    its value and position.

    Args:
        source_path: JSON file supplying the version.
        target_path: JSON file whose ``version`` field is overwritten.
        indent: Indentation width used when rewriting the target.
        dry_run: Compute the result without writing the target.

    Returns:
        A :class:`SyncResult` describing the run.

    Raises:
        StorageError: If either file cannot be read or the target cannot be
            written.
        ParseError: If either file is not valid JSON.
        SchemaError: If the source has no string ``version`` or either file
            is not a JSON object.
    """
    source = Path(source_path)
    target = Path(target_path)

    version = load_source_version(source)
    record = load_record(target)
    previous = record.get("version")

    record["version"] = version
    if not dry_run:
        write_record(target, record, indent=indent)

    result = SyncResult(
        source_path=source,
        target_path=target,
        previous_version=None if previous is None else str(previous),
        version=version,
        written=not dry_run,
    )
    logger.info(
        "%s version %s from %s to %s (previous: %s)",
        "Checked" if dry_run else "Synced",
        version,
        source,
        target,
        result.previous_version,
    )
    return result


__all__ = ["SyncResult", "synchronize_version"]
