"""Run coordinator: configuration → parse → extract → output record."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from javadecl.config import RunConfig, default_output_path
from javadecl.errors import SerializationError
from javadecl.parser.base import CodeParser, FileRecord
from javadecl.parser.java_parser import JavaParser

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Records produced by one run and where they were written."""

    records: list[FileRecord] = field(default_factory=list)
    output_path: Optional[Path] = None

    @property
    def declaration_count(self) -> int:
        return sum(len(r.details) for r in self.records)


def collect(config: RunConfig, parser: Optional[CodeParser] = None) -> list[FileRecord]:
    """
    Parse every configured file, in order, and gather its descriptors.

    The first unreadable or unparsable file aborts the whole collection.

    Args:
        config: Validated run configuration
        parser: Parser to use (default: a fresh JavaParser)

    Returns:
        One FileRecord per configured path, in configuration order
    """
    parser = parser or JavaParser()
    records: list[FileRecord] = []

    for file_path in config.file_paths:
        logger.info("Processing file: %s", file_path)
        if not parser.can_parse(Path(file_path)):
            logger.warning("%s is not a %s file, parsing anyway", file_path, parser.language)

        record = parser.parse_file(file_path)
        for line in record.details:
            logger.info("%s", line)
        records.append(record)

    logger.debug("Collected %d records", len(records))
    return records


def write_records(records: list[FileRecord], output_path: Path) -> None:
    """Write records as a pretty-printed JSON array."""
    payload = [record.to_dict() for record in records]
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        raise SerializationError(output_path, e.strerror or str(e)) from e
    logger.debug("Wrote %d records to %s", len(records), output_path)


def run(
    config: RunConfig,
    output_path: Optional[Path] = None,
    parser: Optional[CodeParser] = None,
) -> RunResult:
    """
    Collect declarations for every configured file and write the output record.

    Nothing is written if any file fails; the error propagates to the caller.
    """
    out = Path(output_path) if output_path is not None else default_output_path()
    records = collect(config, parser=parser)
    write_records(records, out)
    return RunResult(records=records, output_path=out)
