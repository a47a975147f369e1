import pytest
from pathlib import Path

from openair_airspace.models.latlng import LatLng

TEST_ZONE = """\
AC R
AN Test Zone
AL SFC
AH 3500ft
V X=51:30:00 N 000:10:00 W
DC 5
"""

MULTI_BLOCK = """\
* Sample airspace file
AC D
AN DANGER AREA ONE
AL 2000ft
AH FL65
V X=52:00:00 N 001:00:00 W
DC 2
*
*
AC G
AN GLIDER SITE
V X=53:00:00 N 002:00:00 W
DC 1
*
AC P
AN PROHIBITED TRIANGLE
AL SFC
AH 1500 ALT
DP 50:00:00 N 001:00:00 E
DP 50:10:00 N 001:00:00 E
DP 50:10:00 N 001:10:00 E
"""


@pytest.fixture
def test_zone_text() -> str:
    """Return a single restricted circle definition."""
    return TEST_ZONE


@pytest.fixture
def multi_block_text() -> str:
    """Return a document with danger, glider and prohibited blocks."""
    return MULTI_BLOCK


@pytest.fixture
def test_zone_center() -> LatLng:
    """Return the center of the test zone circle."""
    return LatLng(51.5, -10 / 60)


@pytest.fixture
def openair_file(tmp_path, multi_block_text) -> Path:
    """Write the multi block document to a temporary file."""
    path = tmp_path / 'airspace.txt'
    path.write_text(multi_block_text, encoding='utf-8')
    return path
