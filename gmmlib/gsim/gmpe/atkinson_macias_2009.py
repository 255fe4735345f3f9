"""
Atkinson & Macias (2009) subduction interface GMPE
"""

import numpy as np

from ...utils import BASE_10_TO_E, hypot
from ..base import GroundMotionModel
from ..coefficients import CoefficientTable
from ..ground_motion import ScalarGroundMotion
from ..registry import register_gmm



__all__ = ['AtkinsonMacias2009']


## Converts log10 of cm/s2 to ln of g: ln(980)
GFAC = 6.8875526


@register_gmm
class AtkinsonMacias2009(GroundMotionModel):
	"""
	Atkinson, G.M. and Macias, D.M., 2009, Predicted ground motions for
	great interface earthquakes in the Cascadia subduction zone: BSSA,
	v. 99, p. 1552-1578, doi:10.1785/0120080147

		Magnitude scale: MW
		Magnitude range: 7.5 - 9.0
		Distance metric: Rupture
		Distance range: 0 - 400 km
		Intensity measure types: PGA, SA
		Component: geometric mean of two horizontal components
		Soil classes: vs30 = 760 m/s only

	Implementation notes:
		- Only applicable to vs30 = 760 m/s. The AB08 nonlinear site
		  amplification (which requires PGA on rock) is not implemented,
		  vs30 is ignored.
		- The 0.13 Hz ordinate is assigned to 7.5 s, whereas the NSHM
		  fortran code converts it to 7.7 s.
		- No magnitude or distance clipping: outside the data range the
		  equation is extrapolated.
	"""
	ID = "AM_09_INTER"
	NAME = "Atkinson & Macias (2009): Interface"
	COEFFS = CoefficientTable("AM09.csv", model=NAME)
	COEFF_NAMES = ('c0', 'c1', 'c2', 'c3', 'c4', 'sig')
	DISTANCE_METRIC = "rRup"
	Mtype = "MW"
	Mmin, Mmax = 7.5, 9.0
	dmin, dmax = 0., 400.

	def calc(self, gmm_input):
		mean = calc_mean(self.coeffs, gmm_input.Mw, gmm_input.rRup)
		sigma = self.coeffs['sig'] * BASE_10_TO_E
		return ScalarGroundMotion(mean, sigma)


def calc_mean(C, Mw, rRup):
	"""
	Mean ground motion (ln g)

	:param C:
		instance of :class:`Coefficients`
	:param Mw:
		float, moment magnitude
	:param rRup:
		float, rupture distance in km
	"""
	## Magnitude-dependent pseudo-depth, may be negative
	h = (Mw * Mw) - (3.1 * Mw) - 14.55
	dM = Mw - 8.0
	gnd = C['c0'] + (C['c3'] * dM) + (C['c4'] * dM * dM)
	r = hypot(rRup, h)
	gnd += C['c1'] * np.log10(r) + C['c2'] * r

	return gnd * BASE_10_TO_E - GFAC
