"""
Akkar & Bommer (2010) GMPE
"""

import numpy as np

from ...imt import Imt
from ...utils import BASE_10_TO_E, LN_G_CMS2, hypot, rake_to_mechanism
from ..base import GroundMotionModel
from ..coefficients import CoefficientTable
from ..ground_motion import ScalarGroundMotion
from ..registry import register_gmm



__all__ = ['AkkarBommer2010']


@register_gmm
class AkkarBommer2010(GroundMotionModel):
	"""
	Akkar, S. and Bommer, J.J., 2010, Empirical equations for the
	prediction of PGA, PGV, and spectral accelerations in Europe, the
	Mediterranean region, and the Middle East: SRL, v. 81, p. 195-206,
	doi:10.1785/gssrl.81.2.195

		Magnitude scale: MW
		Magnitude range: 5.0 - 7.6
		Distance metric: Joyner-Boore
		Distance range: 0 - 100 km
		Intensity measure types: PGA, PGV, SA
		Original IMT unit: cm/s2 (PGV: cm/s)
		SA period range: 0.05 - 3 s
		Soil classes:
			rock (vs30 >= 750 m/s)
			stiff (360 <= vs30 < 750 m/s)
			soft (vs30 < 360 m/s)
		Fault types: normal, reverse, strike-slip (from rake)
	"""
	ID = "AB_10"
	NAME = "Akkar & Bommer (2010)"
	COEFFS = CoefficientTable("AB10.csv", model=NAME)
	COEFF_NAMES = ('b1', 'b2', 'b3', 'b4', 'b5', 'b6', 'b7', 'b8', 'b9', 'b10',
					'sigma')
	DISTANCE_METRIC = "rJB"
	Mtype = "MW"
	Mmin, Mmax = 5.0, 7.6
	dmin, dmax = 0., 100.

	def calc(self, gmm_input):
		C = self.coeffs
		log_ah = calc_log10_mean(C, gmm_input.Mw, gmm_input.rJB,
								gmm_input.vs30, gmm_input.rake)
		mean = log_ah * BASE_10_TO_E
		if self.imt != Imt.PGV:
			## cm/s2 to g
			mean -= LN_G_CMS2
		return ScalarGroundMotion(mean, C['sigma'] * BASE_10_TO_E)


def site_terms(vs30):
	"""
	Return (SS, SA) dummy variables for soft and stiff soil
	"""
	if vs30 >= 750:
		return 0., 0.
	elif vs30 >= 360:
		return 0., 1.
	elif vs30 < 360:
		return 1., 0.
	else:
		return np.nan, np.nan


def faulting_terms(rake):
	"""
	Return (FN, FR) dummy variables for normal and reverse faulting
	"""
	mechanism = rake_to_mechanism(rake)
	if mechanism == "normal":
		return 1., 0.
	elif mechanism == "reverse":
		return 0., 1.
	else:
		return 0., 0.


def calc_log10_mean(C, Mw, rJB, vs30, rake):
	"""
	Log10 of median ground motion (cm/s2, or cm/s for PGV), equation 1
	"""
	SS, SA = site_terms(vs30)
	FN, FR = faulting_terms(rake)
	return (C['b1'] + C['b2'] * Mw + C['b3'] * Mw * Mw
			+ (C['b4'] + C['b5'] * Mw) * np.log10(hypot(rJB, C['b6']))
			+ C['b7'] * SS + C['b8'] * SA + C['b9'] * FN + C['b10'] * FR)
