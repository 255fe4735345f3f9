"""
Tests for model registration, caching and construction
"""

import threading

import pytest

from gmmlib.imt import Imt
from gmmlib.gsim import registry as registry_module
from gmmlib.gsim import (instance, model_ids, get_registry, register_gmm,
						GroundMotionModel, CoefficientTable, ScalarGroundMotion)
from gmmlib.gsim.base import (MissingCoefficientsError, GmmConfigError,
							UnsupportedConfigurationError, DirectInstantiationError)
from gmmlib.gsim.gmpe import AtkinsonMacias2009


MODEL_IDS = ["AM_09_INTER", "ZHAO_06_CRUSTAL", "ZHAO_06_INTER", "ZHAO_06_SLAB",
			"AB_10", "CAMPBELL_03", "TORO_97"]


class BrokenModel(GroundMotionModel):
	"""
	Model requiring a coefficient that is not in its table
	"""
	ID = "TEST_BROKEN"
	NAME = "Broken test model"
	COEFFS = CoefficientTable("AM09.csv", model=NAME)
	COEFF_NAMES = ('c0', 'c9')

	def calc(self, gmm_input):
		return ScalarGroundMotion(0., 0.)


def test_all_models_registered():
	for model_id in MODEL_IDS:
		assert model_id in model_ids()


def test_instance_is_cached(registry):
	model = registry.instance("AM_09_INTER", Imt.PGA)
	assert registry.instance("AM_09_INTER", Imt.PGA) is model
	assert registry.instance("am_09_inter", "PGA") is model
	assert len(registry) == 1
	assert ("AM_09_INTER", Imt.PGA) in registry
	assert ("AM_09_INTER", Imt.SA1P0) not in registry


def test_instances_per_imt(registry):
	pga = registry.instance("AM_09_INTER", Imt.PGA)
	sa = registry.instance("AM_09_INTER", Imt.SA1P0)
	assert pga is not sa
	assert pga.imt is Imt.PGA
	assert sa.coeffs['c0'] == 3.140
	assert len(registry) == 2


def test_clear(registry):
	model = registry.instance("AB_10", Imt.PGV)
	registry.clear()
	assert len(registry) == 0
	assert registry.instance("AB_10", Imt.PGV) is not model


def test_default_registry():
	assert instance("TORO_97", Imt.PGA) is get_registry().instance("TORO_97", "PGA")


def test_unknown_model(registry):
	with pytest.raises(UnsupportedConfigurationError) as excinfo:
		registry.instance("NO_SUCH_MODEL", Imt.PGA)
	assert excinfo.value.imt is None
	assert "NO_SUCH_MODEL" in str(excinfo.value)


@pytest.mark.parametrize("imt", [Imt.PGV, Imt.SA0P01, "SA(0.13)", "0.13", 0.13,
								"SA(0.01)"])
def test_unsupported_imt(registry, imt):
	with pytest.raises(UnsupportedConfigurationError):
		registry.instance("AM_09_INTER", imt)
	assert len(registry) == 0


@pytest.mark.parametrize("imt", ["SA(1.0)", "sa1p0", "1.0", 1.0])
def test_imt_label_resolves(registry, imt):
	model = registry.instance("AM_09_INTER", imt)
	assert model is registry.instance("AM_09_INTER", Imt.SA1P0)
	assert model.imt is Imt.SA1P0


def test_unsupported_imt_is_value_error(registry):
	with pytest.raises(ValueError):
		registry.instance("CAMPBELL_03", Imt.PGV)


def test_missing_coefficients_not_cached(registry, monkeypatch):
	monkeypatch.setitem(registry_module._model_classes, "TEST_BROKEN", BrokenModel)
	with pytest.raises(MissingCoefficientsError) as excinfo:
		registry.instance("TEST_BROKEN", Imt.PGA)
	assert excinfo.value.name == 'c9'
	assert ("TEST_BROKEN", Imt.PGA) not in registry
	assert len(registry) == 0


def test_direct_instantiation():
	with pytest.raises(DirectInstantiationError):
		AtkinsonMacias2009(Imt.PGA)
	with pytest.raises(TypeError):
		AtkinsonMacias2009(Imt.PGA, token=object())


def test_model_is_immutable(registry):
	model = registry.instance("ZHAO_06_SLAB", Imt.PGA)
	with pytest.raises(AttributeError):
		model.coeffs = None
	with pytest.raises(AttributeError):
		model.slab_coeffs = None
	with pytest.raises(AttributeError):
		del model.imt


def test_duplicate_id(monkeypatch):
	monkeypatch.setattr(registry_module, "_model_classes",
						dict(registry_module._model_classes))

	class OtherAM09(AtkinsonMacias2009):
		pass

	with pytest.raises(GmmConfigError):
		register_gmm(OtherAM09)
	## Registering the same class again is harmless
	assert register_gmm(AtkinsonMacias2009) is AtkinsonMacias2009


def test_register_requires_model_class():
	with pytest.raises(GmmConfigError):
		register_gmm(object)


def test_concurrent_first_access(registry, monkeypatch):
	constructed = []
	init_coeffs = AtkinsonMacias2009._init_coeffs

	def counting_init_coeffs(self, imt):
		constructed.append(imt)
		init_coeffs(self, imt)

	monkeypatch.setattr(AtkinsonMacias2009, "_init_coeffs", counting_init_coeffs)

	num_threads = 16
	barrier = threading.Barrier(num_threads)
	results = [None] * num_threads

	def worker(i):
		barrier.wait()
		results[i] = registry.instance("AM_09_INTER", Imt.SA0P2)

	threads = [threading.Thread(target=worker, args=(i,))
				for i in range(num_threads)]
	for thread in threads:
		thread.start()
	for thread in threads:
		thread.join()

	assert all(model is results[0] for model in results)
	assert constructed == [Imt.SA0P2]


def test_supported_imts(registry):
	imts = registry.supported_imts("AB_10")
	assert Imt.PGV in imts
	assert Imt.SA3P0 in imts
	assert Imt.SA4P0 not in imts
	assert AtkinsonMacias2009.has_imt("SA(0.13)") is False
	assert AtkinsonMacias2009.has_imt(7.5) is True
