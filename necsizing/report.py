"""Tabular summaries of sizing results."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

import pandas as pd
from pandas.api.types import is_bool_dtype, is_numeric_dtype

from .circuits import CircuitResult
from .wiring.conduit import Conduit

SUMMARY_COLUMNS = [
    "description",
    "sets",
    "phase_size",
    "neutral_size",
    "ground_size",
    "insulation",
    "metal",
    "ocpd_A",
    "ampacity_A",
    "size_per_ampacity",
    "size_per_vd",
    "conduit",
    "conduits",
    "ok",
    "messages",
]


class _SummaryDataFrame(pd.DataFrame):
    """``DataFrame`` subclass that preserves a ``_rows`` attribute."""

    _metadata = ["_rows"]

    @property
    def _constructor(self):  # pragma: no cover - inherited behavior exercised indirectly
        return _SummaryDataFrame


def _attach_rows_attr(df: pd.DataFrame) -> pd.DataFrame:
    """Attach a ``_rows`` attribute with the frame's record representation."""

    frame = _SummaryDataFrame(df) if not isinstance(df, _SummaryDataFrame) else df
    frame._rows = frame.to_dict("records")
    return frame


def _rounded(df: pd.DataFrame, digits: int = 3) -> pd.DataFrame:
    if df.empty:
        return _attach_rows_attr(df.copy())
    rounded = df.copy()
    for column in rounded.columns:
        series = rounded[column]
        # text columns may hold NaN for missing sizes; only numbers are rounded
        if is_bool_dtype(series) or not is_numeric_dtype(series):
            continue
        rounded[column] = series.round(digits)
    return _attach_rows_attr(rounded)


def _summary_row(result: CircuitResult) -> Dict[str, object]:
    phase = result.phase
    return {
        "description": result.description,
        "sets": result.sets,
        "phase_size": phase.size.value if phase else None,
        "neutral_size": result.neutral.size.value if result.neutral else None,
        "ground_size": result.ground.size.value if result.ground else None,
        "insulation": phase.insulation.value if phase else None,
        "metal": phase.metal.value if phase else None,
        "ocpd_A": result.ocpd_rating,
        "ampacity_A": result.circuit_ampacity,
        "size_per_ampacity": result.size_per_ampacity.value if result.size_per_ampacity else None,
        "size_per_vd": result.size_per_voltage_drop.value if result.size_per_voltage_drop else None,
        "conduit": result.conduit_trade_size.label if result.conduit_trade_size else None,
        "conduits": result.conduit_count,
        "ok": result.ok,
        "messages": "; ".join(f"{msg.code}: {msg.message}" for msg in result.messages),
    }


def circuit_summary(results: Iterable[CircuitResult]) -> pd.DataFrame:
    """One row per circuit result."""
    rows: List[Dict[str, object]] = [_summary_row(result) for result in results]
    return _rounded(pd.DataFrame(rows, columns=SUMMARY_COLUMNS))


def conduit_fill_table(conduit: Conduit) -> pd.DataFrame:
    """One row per conduit member plus a totals row."""
    rows: List[Dict[str, object]] = []
    for member in conduit.conduitables:
        rows.append(
            {
                "item": member.description,  # type: ignore[attr-defined]
                "area_in2": member.insulated_area_in2,
                "ccc": member.current_carrying_count,
            }
        )
    trade = conduit.trade_size
    rows.append(
        {
            "item": f"{conduit.conduit_type.label} {trade.label if trade else 'N/A'}",
            "area_in2": conduit.area,
            "ccc": conduit.current_carrying_count,
            "fill_pct": conduit.fill_percentage,
            "max_fill_pct": conduit.max_allowed_fill_percentage,
        }
    )
    return _rounded(pd.DataFrame(rows, columns=["item", "area_in2", "ccc", "fill_pct", "max_fill_pct"]))


def write_csv(path: Path, df: pd.DataFrame) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
