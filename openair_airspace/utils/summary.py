"""Tabular summaries of parsed airspace."""

from typing import Iterable

import pandas as pd

from openair_airspace.models.airspace import AirspacePolygon

SUMMARY_COLUMNS = [
    'name', 'class', 'base_alt_ft', 'ceiling_alt_ft', 'points',
    'min_lat', 'min_lng', 'max_lat', 'max_lng',
]


def polygons_to_dataframe(polygons: Iterable[AirspacePolygon]) -> pd.DataFrame:
    """
    Build a one-row-per-polygon summary table.

    Polygons without points get NaN bounds.
    """
    rows = []
    for polygon in polygons:
        bounds = polygon.bounds or (None, None, None, None)
        rows.append({
            'name': polygon.name,
            'class': polygon.airspace_class,
            'base_alt_ft': polygon.base_altitude_ft,
            'ceiling_alt_ft': polygon.ceiling_altitude_ft,
            'points': len(polygon.coordinates),
            'min_lat': bounds[0],
            'min_lng': bounds[1],
            'max_lat': bounds[2],
            'max_lng': bounds[3],
        })
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def pretty_print_polygons(polygons: Iterable[AirspacePolygon]) -> None:
    """Print a summary table of the polygons."""
    df = polygons_to_dataframe(polygons)
    if df.empty:
        print("No airspace to display")
        return

    with pd.option_context('display.max_rows', None, 'display.width', 200):
        print(df[['name', 'class', 'base_alt_ft', 'ceiling_alt_ft', 'points']].to_string(index=False))
