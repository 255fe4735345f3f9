"""
Zhao et al. (2006) GMPE for crustal, subduction interface and
subduction intraslab earthquakes
"""

import abc

import numpy as np

from ...utils import LN_G_CMS2
from ..base import GroundMotionModel
from ..coefficients import CoefficientTable
from ..ground_motion import ScalarGroundMotion
from ..registry import register_gmm



__all__ = ['ZhaoEtAl2006Crustal', 'ZhaoEtAl2006Interface', 'ZhaoEtAl2006Slab']


## Depth coefficient hc (km), and depth cap (km), p. 901-902
HC = 15.
MAX_DEPTH = 125.

_ASC_NAMES = ('a', 'b', 'c', 'd', 'e', 'FR', 'CH', 'C1', 'C2', 'C3', 'C4',
			'sigma', 'QC', 'WC', 'tauC')


class _ZhaoEtAl2006(GroundMotionModel):
	"""
	Zhao, J.X., Zhang, J., Asano, A., Ohno, Y., Oouchi, T., Takahashi, T.,
	Ogawa, H., Irikura, K., Thio, H.K., Somerville, P.G., Fukushima, Y., and
	Fukushima, Y., 2006, Attenuation relations of strong ground motion in
	Japan using site classification based on predominant period: BSSA,
	v. 96, p. 898-913, doi:10.1785/0120050122

		Magnitude scale: MW
		Magnitude range: 5.0 - 8.3
		Distance metric: Rupture
		Distance range: 0 - 300 km
		Intensity measure types: PGA, SA
		Original IMT unit: cm/s2
		Soil classes (table 2, p. 901):
			hard rock (vs30 > 1100 m/s)
			rock (600 < vs30 <= 1100 m/s)
			hard soil (300 < vs30 <= 600 m/s)
			medium soil (200 < vs30 <= 300 m/s)
			soft soil (vs30 <= 200 m/s)

	Base class, holding the equation terms common to the three
	tectonic settings; coefficients of the crustal table (table 4, 5
	and 6) are used by all three.
	"""
	COEFFS = CoefficientTable("ZHAO06_ASC.csv", model="Zhao et al. (2006)")
	COEFF_NAMES = _ASC_NAMES
	DISTANCE_METRIC = "rRup"
	Mtype = "MW"
	Mmin, Mmax = 5.0, 8.3
	dmin, dmax = 0., 300.

	def calc(self, gmm_input):
		mean = self._calc_mean(gmm_input) - LN_G_CMS2
		return ScalarGroundMotion(mean, self._calc_sigma())

	def _calc_base(self, C, gmm_input, rRup):
		"""
		Magnitude, distance, focal depth and site terms of equation 1, p. 901
		"""
		Mw = gmm_input.Mw
		## Distance term
		r = rRup + C['c'] * np.exp(C['d'] * Mw)
		mean = C['a'] * Mw + C['b'] * rRup - np.log(r)
		mean += focal_depth_term(C, gmm_input.zHyp)
		mean += site_class_term(C, gmm_input.vs30)
		return mean

	@abc.abstractmethod
	def _calc_mean(self, gmm_input):
		"""
		Mean (ln cm/s2), including the terms specific to the tectonic type
		"""
		pass

	@abc.abstractmethod
	def _calc_sigma(self):
		pass


def focal_depth_term(C, zHyp):
	"""
	Focal-depth term, effective for depths >= hc (p. 901),
	with depth capped at 125 km
	"""
	h = np.minimum(zHyp, MAX_DEPTH)
	return C['e'] * np.maximum(h - HC, 0.)


def site_class_term(C, vs30):
	"""
	Site term for the vs30-based site class (table 2, p. 901)
	"""
	if vs30 > 1100.:
		return C['CH']
	elif vs30 > 600.:
		return C['C1']
	elif vs30 > 300.:
		return C['C2']
	elif vs30 > 200.:
		return C['C3']
	elif vs30 <= 200.:
		return C['C4']
	else:
		## vs30 is NaN
		return np.nan


def magnitude_squared_term(P, M, Q, W, Mw):
	"""
	Magnitude-squared correction, equation 5, p. 909
	"""
	dM = Mw - M
	return P * dM + Q * dM * dM + W


@register_gmm
class ZhaoEtAl2006Crustal(_ZhaoEtAl2006):
	"""
	Zhao et al. (2006): active shallow crust.
	Reverse-faulting term applies for 45 < rake < 135 degrees.
	"""
	ID = "ZHAO_06_CRUSTAL"
	NAME = "Zhao et al. (2006): Crustal"

	def _calc_mean(self, gmm_input):
		C = self.coeffs
		mean = self._calc_base(C, gmm_input, gmm_input.rRup)
		if 45. < gmm_input.rake < 135.:
			mean += C['FR']
		mean += magnitude_squared_term(0., 6.3, C['QC'], C['WC'], gmm_input.Mw)
		return mean

	def _calc_sigma(self):
		C = self.coeffs
		return np.sqrt(C['sigma'] ** 2 + C['tauC'] ** 2)


@register_gmm
class ZhaoEtAl2006Interface(_ZhaoEtAl2006):
	"""
	Zhao et al. (2006): subduction interface.
	No faulting-style term; interface term SI.
	"""
	ID = "ZHAO_06_INTER"
	NAME = "Zhao et al. (2006): Interface"
	INTERFACE_COEFFS = CoefficientTable("ZHAO06_SINTER.csv", model=NAME)

	def _init_coeffs(self, imt):
		self._bind("interface_coeffs", self.INTERFACE_COEFFS.get(imt,
								names=('SI', 'QI', 'WI', 'tauI')))

	def _calc_mean(self, gmm_input):
		C, CI = self.coeffs, self.interface_coeffs
		mean = self._calc_base(C, gmm_input, gmm_input.rRup)
		mean += magnitude_squared_term(0., 6.3, CI['QI'], CI['WI'], gmm_input.Mw)
		mean += CI['SI']
		return mean

	def _calc_sigma(self):
		return np.sqrt(self.coeffs['sigma'] ** 2 + self.interface_coeffs['tauI'] ** 2)


@register_gmm
class ZhaoEtAl2006Slab(_ZhaoEtAl2006):
	"""
	Zhao et al. (2006): subduction intraslab.
	No faulting-style term; slab term SS and slab path term SSL * ln(rRup).
	Zero rupture distance is replaced by 0.1 km to avoid the
	singularity in the path term.
	"""
	ID = "ZHAO_06_SLAB"
	NAME = "Zhao et al. (2006): Slab"
	SLAB_COEFFS = CoefficientTable("ZHAO06_SSLAB.csv", model=NAME)

	def _init_coeffs(self, imt):
		self._bind("slab_coeffs", self.SLAB_COEFFS.get(imt,
								names=('SS', 'SSL', 'PS', 'QS', 'WS', 'tauS')))

	def _calc_mean(self, gmm_input):
		C, CS = self.coeffs, self.slab_coeffs
		rRup = gmm_input.rRup
		if rRup == 0:
			rRup = 0.1
		mean = self._calc_base(C, gmm_input, rRup)
		mean += magnitude_squared_term(CS['PS'], 6.5, CS['QS'], CS['WS'],
										gmm_input.Mw)
		mean += CS['SS'] + CS['SSL'] * np.log(rRup)
		return mean

	def _calc_sigma(self):
		return np.sqrt(self.coeffs['sigma'] ** 2 + self.slab_coeffs['tauS'] ** 2)
