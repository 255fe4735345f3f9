"""
Intensity measure types
"""

import enum



__all__ = ['Imt']


class Imt(enum.Enum):
	"""
	Closed enumeration of intensity measure types.

	Member values are (label, period) tuples; use :attr:`period` rather
	than the raw value. Peak ground velocity and displacement have no
	period, PGA is treated as a zero-period spectral ordinate where a
	period is needed (e.g., for plotting spectra).
	"""
	PGA = ("PGA", 0.)
	PGV = ("PGV", None)
	PGD = ("PGD", None)
	SA0P01 = ("SA", 0.01)
	SA0P02 = ("SA", 0.02)
	SA0P03 = ("SA", 0.03)
	SA0P05 = ("SA", 0.05)
	SA0P075 = ("SA", 0.075)
	SA0P1 = ("SA", 0.1)
	SA0P15 = ("SA", 0.15)
	SA0P2 = ("SA", 0.2)
	SA0P25 = ("SA", 0.25)
	SA0P3 = ("SA", 0.3)
	SA0P4 = ("SA", 0.4)
	SA0P5 = ("SA", 0.5)
	SA0P75 = ("SA", 0.75)
	SA1P0 = ("SA", 1.0)
	SA1P5 = ("SA", 1.5)
	SA2P0 = ("SA", 2.0)
	SA3P0 = ("SA", 3.0)
	SA4P0 = ("SA", 4.0)
	SA5P0 = ("SA", 5.0)
	SA7P5 = ("SA", 7.5)
	SA10P0 = ("SA", 10.0)

	def __str__(self):
		if self.is_sa:
			return "SA(%s)" % self.period
		return self.name

	def __repr__(self):
		return '<Imt %s>' % self.name

	@property
	def period(self):
		"""
		Spectral period in seconds (0 for PGA, None for PGV and PGD)
		"""
		return self.value[1]

	@property
	def frequency(self):
		"""
		Spectral frequency in Hz, None if not a spectral acceleration
		"""
		if not self.is_sa:
			return None
		return 1. / self.period

	@property
	def is_sa(self):
		return self.value[0] == "SA"

	@classmethod
	def sa_imts(cls):
		"""
		Return spectral-acceleration members in order of increasing period.
		"""
		return sorted([imt for imt in cls if imt.is_sa], key=lambda imt: imt.period)

	@classmethod
	def from_period(cls, period, tol=1E-6):
		"""
		Look up the spectral acceleration with given period

		:param period:
			float, spectral period in seconds
		:param tol:
			float, absolute tolerance on period
			(default: 1E-6)

		:return:
			instance of :class:`Imt`

		:raises ValueError:
			if no member has that period
		"""
		for imt in cls.sa_imts():
			if abs(imt.period - period) <= tol:
				return imt
		raise ValueError("No spectral period %s s in Imt" % period)

	@classmethod
	def parse(cls, value):
		"""
		Interpret an IMT specification

		:param value:
			instance of :class:`Imt`, member name ("SA1P0", case-insensitive),
			label as returned by :meth:`__str__` ("SA(1.0)")
			or coefficient-table key ("PGA", "PGV", "PGD" or a period
			in seconds, as str or float)

		:return:
			instance of :class:`Imt`

		:raises ValueError:
			if value does not correspond to a member
		"""
		if isinstance(value, cls):
			return value
		if isinstance(value, str):
			key = value.strip().upper()
			if key in cls.__members__:
				return cls.__members__[key]
			if key.startswith("SA(") and key.endswith(")"):
				key = key[3:-1]
			try:
				period = float(key)
			except ValueError:
				raise ValueError("Unknown intensity measure type: %r" % value)
			return cls.from_period(period)
		if isinstance(value, (int, float)) and not isinstance(value, bool):
			return cls.from_period(float(value))
		raise ValueError("Unknown intensity measure type: %r" % (value,))
