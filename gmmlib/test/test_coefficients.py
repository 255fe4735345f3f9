"""
Tests for coefficient tables
"""

import pytest

from gmmlib.imt import Imt
from gmmlib.gsim import coefficients
from gmmlib.gsim.base import MissingCoefficientsError, GmmConfigError
from gmmlib.gsim.coefficients import CoefficientTable, Coefficients, load_table


AM09_PGA = {'c0': 5.006, 'c1': -1.5573, 'c2': -0.00034, 'c3': 0.1774,
			'c4': 0.0827, 'sig': 0.24}


def test_row_matches_csv():
	table = CoefficientTable("AM09.csv", model="AM09")
	C = table.get(Imt.PGA)
	assert dict(C) == AM09_PGA
	assert C.model == "AM09"
	assert C.imt is Imt.PGA
	assert table.names == ('c0', 'c1', 'c2', 'c3', 'c4', 'sig')


def test_supported_imts():
	imts = CoefficientTable("AM09.csv").imts
	assert Imt.PGA in imts
	assert Imt.SA7P5 in imts
	assert Imt.PGV not in imts
	assert len(imts) == 12


def test_attribute_access():
	C = CoefficientTable("AM09.csv").get(Imt.SA1P0)
	assert C.c0 == C['c0'] == 3.140
	with pytest.raises(AttributeError):
		C.c9
	with pytest.raises(AttributeError):
		C.c0 = 1.
	with pytest.raises(KeyError):
		C['c9']


def test_equality():
	table = CoefficientTable("AM09.csv", model="AM09")
	C1, C2 = table.get(Imt.PGA), table.get(Imt.PGA)
	assert C1 == C2
	assert hash(C1) == hash(C2)
	assert C1 != table.get(Imt.SA1P0)
	assert C1 == Coefficients("AM09", Imt.PGA, AM09_PGA)


def test_missing_row():
	table = CoefficientTable("AM09.csv", model="AM09")
	with pytest.raises(MissingCoefficientsError) as excinfo:
		table.get(Imt.PGV)
	assert excinfo.value.imt is Imt.PGV
	assert excinfo.value.model == "AM09"
	assert "PGV" in str(excinfo.value)


def test_missing_coefficient():
	table = CoefficientTable("AM09.csv", model="AM09")
	with pytest.raises(MissingCoefficientsError) as excinfo:
		table.get(Imt.PGA, names=('c0', 'c9'))
	assert excinfo.value.name == 'c9'


def test_missing_table(table_cache_reset):
	with pytest.raises(GmmConfigError):
		load_table("NO_SUCH_TABLE.csv")


def test_table_parsed_once(table_cache_reset, monkeypatch):
	calls = []
	parse_table = coefficients._parse_table

	def counting_parse_table(filespec):
		calls.append(filespec)
		return parse_table(filespec)

	monkeypatch.setattr(coefficients, "_parse_table", counting_parse_table)
	table = CoefficientTable("AB10.csv")
	table.get(Imt.PGA)
	table.get(Imt.PGV)
	CoefficientTable("AB10.csv").get(Imt.SA1P0)
	assert len(calls) == 1


def test_unrecognized_key(tmp_path):
	filespec = tmp_path / "bad.csv"
	filespec.write_text("T,a,b\nPGA,1.0,2.0\nFOO,3.0,4.0\n")
	with pytest.raises(GmmConfigError):
		coefficients._parse_table(str(filespec))


def test_duplicate_key(tmp_path):
	filespec = tmp_path / "dup.csv"
	filespec.write_text("T,a\nPGA,1.0\n0.1,2.0\nPGA,3.0\n")
	with pytest.raises(GmmConfigError):
		coefficients._parse_table(str(filespec))


def test_single_row(tmp_path):
	filespec = tmp_path / "single.csv"
	filespec.write_text("T,a,b\n1.0,1.5,2.5\n")
	names, rows = coefficients._parse_table(str(filespec))
	assert names == ('a', 'b')
	assert rows == {Imt.SA1P0: {'a': 1.5, 'b': 2.5}}
