"""
Tests for conversion of intensity measure types to OpenQuake
"""

import pytest

oq_imt = pytest.importorskip("openquake.hazardlib.imt")

from gmmlib.imt import Imt
from gmmlib.gsim.oqhazlib import to_oq_imt, from_oq_imt


def test_to_oq_imt():
	assert to_oq_imt(Imt.PGA) == oq_imt.PGA()
	assert to_oq_imt("SA1P0") == oq_imt.SA(1.0)
	assert to_oq_imt(Imt.PGV) == oq_imt.PGV()


@pytest.mark.parametrize("imt", [Imt.PGA, Imt.PGV, Imt.SA0P2, Imt.SA7P5])
def test_from_oq_imt(imt):
	assert from_oq_imt(to_oq_imt(imt)) is imt


def test_from_oq_imt_unknown_period():
	with pytest.raises(ValueError):
		from_oq_imt(oq_imt.SA(0.13))
