"""Parquet persistence helpers for the tick log stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from snake_lookahead.io.schemas import TICK_LOG_SCHEMA

TickColumns = dict[str, list[int | str | float | bool | None]]


def empty_tick_columns() -> TickColumns:
    """Return an empty column buffer matching ``TICK_LOG_SCHEMA``."""
    return {name: [] for name in TICK_LOG_SCHEMA.names}


def flush_tick_columns(
    tick_columns: TickColumns,
    tick_log_path: Path,
    tick_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated tick rows to Parquet and clear in-memory buffers."""
    if not tick_columns["episode_id"]:
        return tick_writer
    tick_table = pa.Table.from_pydict(tick_columns, schema=TICK_LOG_SCHEMA)
    if tick_writer is None:
        tick_writer = pq.ParquetWriter(tick_log_path, TICK_LOG_SCHEMA)
    tick_writer.write_table(tick_table)
    for values in tick_columns.values():
        values.clear()
    return tick_writer
