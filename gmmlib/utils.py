"""
Utilities: unit-conversion constants and small numeric helpers
shared by the ground-motion models
"""

import numpy as np
from scipy.constants import g



__all__ = ['BASE_10_TO_E', 'LN_G', 'LN_G_CMS2', 'hypot', 'log10_to_ln',
			'cms2_to_g_ln', 'rake_to_mechanism']


## Multiply a log10 value by this to obtain the natural log
BASE_10_TO_E = np.log(10.)

## Natural log of standard gravity (m/s2 and cm/s2)
LN_G = np.log(g)
LN_G_CMS2 = np.log(g * 100.)


def hypot(x, y):
	"""
	Square root of x**2 + y**2.
	Signs of x and y are irrelevant; NaN propagates.

	:param x:
		float or array
	:param y:
		float or array

	:return:
		float or array
	"""
	return np.sqrt(x * x + y * y)


def log10_to_ln(value):
	"""
	Convert a base-10 logarithm (or log-standard deviation)
	to natural-log units
	"""
	return value * BASE_10_TO_E


def cms2_to_g_ln(ln_value):
	"""
	Convert natural log of an acceleration in cm/s2 to natural log in g
	"""
	return ln_value - LN_G_CMS2


def rake_to_mechanism(rake):
	"""
	Classify rake into a faulting style, using +/- 45 degrees
	as demarcation between dip-slip and strike-slip

	:param rake:
		float, rake in degrees (-180 - 180)

	:return:
		str, "normal", "reverse" or "strike-slip".
		NaN rake is classified as strike-slip
	"""
	if 45. < rake < 135.:
		return "reverse"
	elif -135. < rake < -45.:
		return "normal"
	else:
		return "strike-slip"
