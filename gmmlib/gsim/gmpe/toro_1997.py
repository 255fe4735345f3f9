"""
Toro et al. (1997) GMPE for the midcontinent of eastern North America,
with the 2002 modification for large magnitudes and short distances
"""

import numpy as np

from ...imt import Imt
from ...utils import LN_G, hypot
from ..base import GroundMotionModel
from ..coefficients import CoefficientTable
from ..ground_motion import ScalarGroundMotion
from ..registry import register_gmm



__all__ = ['ToroEtAl1997']


@register_gmm
class ToroEtAl1997(GroundMotionModel):
	"""
	Toro, G.R., Abrahamson, N.A., and Schneider, J.F., 1997, Model of
	strong ground motions from earthquakes in central and eastern North
	America: best estimates and uncertainties: SRL, v. 68, p. 41-57,
	doi:10.1785/gssrl.68.1.41

	Toro, G.R., 2002, Modification of the Toro et al. (1997) attenuation
	equations for large magnitudes and short distances: Risk Engineering
	technical report.

		Magnitude scale: MW
		Magnitude range: 5.0 - 8.0
		Distance metric: Joyner-Boore
		Distance range: 1 - 1000 km
		Intensity measure types: PGA, SA
		Original IMT unit: m/s2
		Soil classes: hard rock only (vs30 = 2800 m/s, kappa = 0.005 s)

	Coefficients c1 - c7 are the hard-rock (kappa = 0.005 s) values of
	Drouet et al. (2010), table 20. rJB is clipped at 1 km in the median
	(but not in the distance-dependent aleatory variability).
	"""
	ID = "TORO_97"
	NAME = "Toro et al. (1997)"
	COEFFS = CoefficientTable("TORO97.csv", model=NAME)
	COEFF_NAMES = ('c1', 'c2', 'c3', 'c4', 'c5', 'c6', 'c7', 'm50', 'm55', 'm80',
					'r5', 'r20')
	DISTANCE_METRIC = "rJB"
	Mtype = "MW"
	Mmin, Mmax = 5.0, 8.0
	dmin, dmax = 1., 1000.

	def calc(self, gmm_input):
		C = self.coeffs
		Mw, rJB = gmm_input.Mw, gmm_input.rJB
		mean = calc_mean(C, Mw, np.maximum(rJB, 1.)) - LN_G
		sigma = calc_sigma(C, Mw, rJB, long_period=self._is_long_period())
		return ScalarGroundMotion(mean, sigma)

	def _is_long_period(self):
		return self.imt != Imt.PGA and self.imt.period >= 1.


def calc_mean(C, Mw, rJB):
	"""
	Mean (ln m/s2), equation 3, with the distance term
	of the 2002 model (equation 4-3)
	"""
	dM = Mw - 6.
	x = np.exp(-1.25 + 0.227 * Mw)
	RM = hypot(rJB, C['c7'] * x)
	mean = C['c1'] + C['c2'] * dM + C['c3'] * dM * dM
	mean -= C['c4'] * np.log(RM)
	mean -= (C['c5'] - C['c4']) * np.maximum(np.log(RM / 100.), 0.)
	mean -= C['c6'] * RM
	return mean


def calc_sigma(C, Mw, rJB, long_period=False):
	"""
	Total standard deviation, equations 5 and 6:
	aleatory (magnitude and distance dependent) and epistemic parts
	"""
	sigma_ale_m = np.interp(Mw, [5.0, 5.5, 8.0], [C['m50'], C['m55'], C['m80']])
	sigma_ale_r = np.interp(rJB, [5.0, 20.0], [C['r5'], C['r20']])
	if long_period:
		sigma_epi = 0.34 + 0.06 * (Mw - 6.)
	else:
		sigma_epi = 0.36 + 0.07 * (Mw - 6.)
	return np.sqrt(sigma_ale_m ** 2 + sigma_ale_r ** 2 + sigma_epi ** 2)
