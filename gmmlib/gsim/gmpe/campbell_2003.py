"""
Campbell (2003) hybrid-empirical GMPE for eastern North America
"""

import numpy as np

from ...utils import LN_G, hypot
from ..base import GroundMotionModel
from ..coefficients import CoefficientTable
from ..ground_motion import ScalarGroundMotion
from ..registry import register_gmm



__all__ = ['Campbell2003']


## Compute these logs only once
LN70, LN130 = np.log(70.), np.log(130.)


@register_gmm
class Campbell2003(GroundMotionModel):
	"""
	Campbell, K.W., 2003, Prediction of strong ground motion using the
	hybrid empirical method and its use in the development of
	ground-motion (attenuation) relations in eastern North America:
	BSSA, v. 93, p. 1012-1033, doi:10.1785/0120020002,
	including the corrections of the 2004 erratum.

		Magnitude scale: MW
		Magnitude range: 5.0 - 8.2
		Distance metric: Rupture
		Distance range: 0 - 1000 km
		Intensity measure types: PGA, SA
		Original IMT unit: m/s2
		Soil classes: hard rock only (vs30 = 2800 m/s, kappa = 0.006 s)

	vs30 is ignored; the coefficient set is the one for hard rock
	with kappa = 0.006 s.
	"""
	ID = "CAMPBELL_03"
	NAME = "Campbell (2003)"
	COEFFS = CoefficientTable("CAMPBELL03.csv", model=NAME)
	COEFF_NAMES = ('c1', 'c2', 'c3', 'c4', 'c5', 'c6', 'c7', 'c8', 'c9', 'c10',
					'c11', 'c12', 'c13')
	DISTANCE_METRIC = "rRup"
	Mtype = "MW"
	Mmin, Mmax = 5.0, 8.2
	dmin, dmax = 0., 1000.

	def calc(self, gmm_input):
		C = self.coeffs
		Mw, rRup = gmm_input.Mw, gmm_input.rRup
		mean = C['c1'] + calc_f1(C, Mw) + calc_f2(C, Mw, rRup) + calc_f3(C, rRup)
		## m/s2 to g
		mean -= LN_G
		return ScalarGroundMotion(mean, calc_sigma(C, Mw))


def calc_f1(C, Mw):
	"""
	Magnitude term, equation 31
	"""
	x = 8.5 - Mw
	return C['c2'] * Mw + C['c3'] * x * x


def calc_f2(C, Mw, rRup):
	"""
	Geometric spreading and anelastic attenuation, equation 32
	"""
	R = hypot(rRup, C['c7'] * np.exp(C['c8'] * Mw))
	return C['c4'] * np.log(R) + (C['c5'] + C['c6'] * Mw) * rRup


def calc_f3(C, rRup):
	"""
	Segmented attenuation beyond 70 and 130 km, equation 34
	as corrected in the erratum
	"""
	if rRup <= 70.:
		return 0.
	ln_r = np.log(rRup)
	f3 = C['c9'] * (ln_r - LN70)
	if rRup <= 130.:
		return f3
	return f3 + C['c10'] * (ln_r - LN130)


def calc_sigma(C, Mw):
	"""
	Total standard deviation, equation 35
	"""
	if Mw >= 7.16:
		return C['c13']
	return C['c11'] + C['c12'] * Mw
