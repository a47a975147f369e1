import pandas as pd

from openair_airspace.models.airspace import AirspacePolygon
from openair_airspace.models.latlng import LatLng
from openair_airspace.utils.summary import SUMMARY_COLUMNS, polygons_to_dataframe, pretty_print_polygons


def make_polygons():
    return [
        AirspacePolygon(
            coordinates=(LatLng(50, 0), LatLng(50, 1), LatLng(51, 1)),
            base_altitude_ft=0,
            ceiling_altitude_ft=3500,
            name="Zone A",
            airspace_class="R",
        ),
        AirspacePolygon(name="Empty", airspace_class="D"),
    ]


class TestPolygonsToDataFrame:
    """Tests for the tabular summary."""

    def test_columns_and_rows(self):
        df = polygons_to_dataframe(make_polygons())
        assert list(df.columns) == SUMMARY_COLUMNS
        assert len(df) == 2

    def test_values(self):
        df = polygons_to_dataframe(make_polygons())
        first = df.iloc[0]
        assert first['name'] == "Zone A"
        assert first['class'] == "R"
        assert first['points'] == 3
        assert first['min_lat'] == 50
        assert first['max_lng'] == 1
        assert first['ceiling_alt_ft'] == 3500

    def test_empty_polygon_has_missing_bounds(self):
        df = polygons_to_dataframe(make_polygons())
        assert df.iloc[1]['points'] == 0
        assert pd.isna(df.iloc[1]['min_lat'])

    def test_no_polygons(self):
        df = polygons_to_dataframe([])
        assert df.empty
        assert list(df.columns) == SUMMARY_COLUMNS


class TestPrettyPrint:
    """Tests for pretty_print_polygons."""

    def test_prints_table(self, capsys):
        pretty_print_polygons(make_polygons())
        out = capsys.readouterr().out
        assert "Zone A" in out
        assert "Empty" in out

    def test_prints_placeholder_when_empty(self, capsys):
        pretty_print_polygons([])
        assert capsys.readouterr().out.strip() == "No airspace to display"
