"""
Conversion between :class:`Imt` and OpenQuake hazardlib intensity
measure types. Requires openquake.hazardlib (install the "oq" extra).
"""

from ..imt import Imt



__all__ = ['to_oq_imt', 'from_oq_imt']


def to_oq_imt(imt):
	"""
	Convert to OpenQuake intensity measure type

	:param imt:
		instance of :class:`Imt` or str understood by :meth:`Imt.parse`

	:return:
		instance of :class:`openquake.hazardlib.imt.IMT`
	"""
	from openquake.hazardlib import imt as oq_imt

	imt = Imt.parse(imt)
	if imt.is_sa:
		return oq_imt.SA(imt.period)
	return getattr(oq_imt, imt.name)()


def from_oq_imt(oq_imt):
	"""
	Convert OpenQuake intensity measure type

	:param oq_imt:
		instance of :class:`openquake.hazardlib.imt.IMT`

	:return:
		instance of :class:`Imt`

	:raises ValueError:
		if there is no corresponding :class:`Imt`
	"""
	name = oq_imt.string.split("(")[0]
	if name == "SA":
		return Imt.from_period(oq_imt.period)
	return Imt.parse(name)
