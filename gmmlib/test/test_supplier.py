"""
Tests for transform suppliers and spectrum calculation
"""

import pytest

from gmmlib.imt import Imt
from gmmlib.gsim import (GroundMotionSupplier, GroundMotionTransform,
						TransformSupplier, Transform, GmmInput,
						calc_spectrum, calc_pgm)
from gmmlib.gsim.base import UnsupportedConfigurationError


def test_supplier_returns_transform(registry, scenario):
	supplier = GroundMotionSupplier("PGA", registry=registry)
	assert isinstance(supplier, TransformSupplier)
	transform = supplier.get("AB_10")
	assert isinstance(transform, Transform)
	assert isinstance(transform, GroundMotionTransform)
	model = registry.instance("AB_10", Imt.PGA)
	assert transform.model is model
	assert transform.apply(scenario) == model.calc(scenario)
	assert transform(scenario) == model.calc(scenario)


def test_transform_batch(registry):
	transform = GroundMotionSupplier(Imt.SA1P0, registry=registry).get("AM_09_INTER")
	inputs = [GmmInput.create(Mw=8., rRup=r) for r in (50., 100., 200.)]
	results = transform.apply(inputs)
	assert len(results) == 3
	assert results[0].mean > results[1].mean > results[2].mean


def test_supplier_unsupported(registry):
	supplier = GroundMotionSupplier(Imt.PGV, registry=registry)
	with pytest.raises(UnsupportedConfigurationError):
		supplier.get("AM_09_INTER")
	with pytest.raises(UnsupportedConfigurationError):
		supplier.get("NO_SUCH_MODEL")


def test_transform_supplier_is_abstract():
	with pytest.raises(TypeError):
		TransformSupplier()


def test_calc_spectrum(registry, scenario):
	spectrum = calc_spectrum("AM_09_INTER", scenario, registry=registry)
	imts = [imt for imt, gm in spectrum]
	assert len(spectrum) == 11
	assert Imt.PGA not in imts
	assert [imt.period for imt in imts] == sorted(imt.period for imt in imts)
	for imt, gm in spectrum:
		assert gm == registry.instance("AM_09_INTER", imt).calc(scenario)


def test_calc_pgm(registry, scenario):
	pgm = calc_pgm("AB_10", scenario, registry=registry)
	assert set(pgm.keys()) == set([Imt.PGA, Imt.PGV])
	pgm = calc_pgm("TORO_97", scenario, registry=registry)
	assert set(pgm.keys()) == set([Imt.PGA])


def test_calc_spectrum_unknown_model(registry, scenario):
	with pytest.raises(UnsupportedConfigurationError):
		calc_spectrum("NO_SUCH_MODEL", scenario, registry=registry)
