"""
Response spectra and peak ground motions of a single model
"""

from ..imt import Imt
from .registry import get_registry



__all__ = ['calc_spectrum', 'calc_pgm']


def calc_spectrum(model_id, gmm_input, registry=None):
	"""
	Compute response spectrum for a single input

	:param model_id:
		str, model identifier
	:param gmm_input:
		instance of :class:`GmmInput`
	:param registry:
		instance of :class:`ModelRegistry`
		(default: None, use default registry)

	:return:
		list of (Imt, ScalarGroundMotion) tuples for the spectral
		accelerations supported by the model, in order of increasing period

	:raises UnsupportedConfigurationError:
		if model_id is unknown
	"""
	registry = registry or get_registry()
	supported = registry.supported_imts(model_id)
	spectrum = []
	for imt in Imt.sa_imts():
		if imt in supported:
			model = registry.instance(model_id, imt)
			spectrum.append((imt, model.calc(gmm_input)))
	return spectrum


def calc_pgm(model_id, gmm_input, registry=None):
	"""
	Compute peak ground motions (PGA, PGV, PGD) supported by a model

	:return:
		dict mapping Imt to ScalarGroundMotion
	"""
	registry = registry or get_registry()
	supported = registry.supported_imts(model_id)
	pgm = {}
	for imt in (Imt.PGA, Imt.PGV, Imt.PGD):
		if imt in supported:
			pgm[imt] = registry.instance(model_id, imt).calc(gmm_input)
	return pgm
