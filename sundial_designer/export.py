"""
Tabular views of a dial drawing, one row per curve point or label.
"""
import os
from typing import Dict

import pandas as pd

from sundial_designer.design import DialDrawing


def hour_lines_frame(drawing: DialDrawing) -> pd.DataFrame:
    rows = []
    for line in drawing.hour_lines:
        for seg, points in enumerate(line.segments):
            for p in points:
                rows.append({"hour_clock": line.hour, "interval": line.interval_id, "style": line.style.id,
                             "segment": seg, "daynum": p.day, "x": p.x, "y": p.y})
    return pd.DataFrame(rows, columns=["hour_clock", "interval", "style", "segment", "daynum", "x", "y"])


def declination_lines_frame(drawing: DialDrawing) -> pd.DataFrame:
    rows = []
    for line in drawing.declination_lines:
        for seg, points in enumerate(line.segments):
            for p in points:
                rows.append({"mark": line.mark_id, "declination_deg": line.declination, "style": line.style.id,
                             "segment": seg, "hour_clock": p.hour, "x": p.x, "y": p.y})
    return pd.DataFrame(rows, columns=["mark", "declination_deg", "style", "segment", "hour_clock", "x", "y"])


def labels_frame(drawing: DialDrawing) -> pd.DataFrame:
    rows = []
    for line in drawing.hour_lines:
        for label in line.labels:
            rows.append({"hour_clock": line.hour, "text": label.text, "side": label.side,
                         "daynum": label.day, "x": label.x, "y": label.y})
    return pd.DataFrame(rows, columns=["hour_clock", "text", "side", "daynum", "x", "y"])


def write_tables(drawing: DialDrawing, outdir: str, prefix: str = "sundial") -> Dict[str, str]:
    """Write the three tables as CSV; returns table name -> path."""
    os.makedirs(outdir, exist_ok=True)
    frames = {
        "hour_lines": hour_lines_frame(drawing),
        "declination_lines": declination_lines_frame(drawing),
        "labels": labels_frame(drawing),
    }
    paths = {}
    for name, df in frames.items():
        path = os.path.join(outdir, f"{prefix}_{name}.csv")
        df.to_csv(path, index=False)
        paths[name] = path
    return paths
