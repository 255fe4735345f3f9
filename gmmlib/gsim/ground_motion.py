"""
Scalar ground-motion distribution
"""

from collections import namedtuple

import numpy as np
import scipy.stats



__all__ = ['ScalarGroundMotion']


class ScalarGroundMotion(namedtuple('ScalarGroundMotion', ('mean', 'sigma'))):
	"""
	Log-normal ground-motion distribution

	:param mean:
		float, mean of the natural logarithm of the ground motion
		(g for PGA and SA, cm/s for PGV, cm for PGD)
	:param sigma:
		float, standard deviation of the natural logarithm, >= 0
	"""
	__slots__ = ()

	def __new__(cls, mean, sigma):
		mean, sigma = float(mean), float(sigma)
		## NaN sigma passes and propagates
		if sigma < 0:
			raise ValueError("sigma must be non-negative, got %s" % sigma)
		return super(ScalarGroundMotion, cls).__new__(cls, mean, sigma)

	@property
	def median(self):
		"""
		Median ground motion (exp of mean)
		"""
		return np.exp(self.mean)

	def epsilon(self, iml):
		"""
		Determine epsilon for given intensity measure level(s)

		:param iml:
			float or numpy array, intensity measure level(s), in the
			unit of the ground-motion measure

		:return:
			float or numpy array, number of standard deviations between
			ln(iml) and the mean
		"""
		return (np.log(iml) - self.mean) / self.sigma

	def exceedance_probability(self, iml, truncation_level=None):
		"""
		Compute probability of exceedance of given intensity measure
		level(s) for this scenario

		:param iml:
			float or numpy array, intensity measure level(s)
		:param truncation_level:
			float, number of standard deviations at which to truncate
			the distribution. 0 means the median is treated as an exact
			value
			(default: None, no truncation)

		:return:
			float or numpy array, probability(ies) of exceedance
		"""
		ln_iml = np.log(iml)
		if truncation_level == 0:
			return (ln_iml < self.mean) * 1.0
		if truncation_level is None:
			dist = scipy.stats.norm(self.mean, self.sigma)
		elif truncation_level > 0:
			dist = scipy.stats.truncnorm(-truncation_level, truncation_level,
										self.mean, self.sigma)
		else:
			raise ValueError("Truncation level must be None, 0 or positive")
		return dist.sf(ln_iml)
