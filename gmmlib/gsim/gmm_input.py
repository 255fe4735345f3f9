"""
Earthquake source and site description consumed by ground-motion models
"""

from collections import namedtuple

from ..config import get_config



__all__ = ['GmmInput', 'GmmInputBuilder', 'GMM_INPUT_FIELDS']


GMM_INPUT_FIELDS = ('Mw', 'rJB', 'rRup', 'rX', 'dip', 'width', 'zTop', 'zHyp',
					'rake', 'vs30', 'vsInf', 'z1p0', 'z2p5')


class GmmInput(namedtuple('GmmInput', GMM_INPUT_FIELDS)):
	"""
	Immutable set of source and site parameters

	:param Mw:
		float, moment magnitude
	:param rJB:
		float, Joyner-Boore distance (km)
	:param rRup:
		float, closest distance to rupture surface (km)
	:param rX:
		float, horizontal distance to surface projection of the
		top edge of the rupture, measured perpendicular to strike (km)
	:param dip:
		float, rupture dip (degrees)
	:param width:
		float, down-dip rupture width (km)
	:param zTop:
		float, depth to top of rupture (km)
	:param zHyp:
		float, hypocentral depth (km)
	:param rake:
		float, rupture rake (degrees)
	:param vs30:
		float, average shear-wave velocity in the upper 30 m (m/s)
	:param vsInf:
		bool, whether vs30 is inferred (True) or measured (False)
	:param z1p0:
		float, depth to 1.0 km/s shear-wave velocity horizon (km),
		NaN if unknown
	:param z2p5:
		float, depth to 2.5 km/s shear-wave velocity horizon (km),
		NaN if unknown

	Use :meth:`create` or :meth:`builder` to fill in defaults from
	the configuration. Values are not checked for physical plausibility.
	"""
	__slots__ = ()

	@classmethod
	def defaults(cls):
		"""
		Return dict with default field values from the configuration
		"""
		section = get_config()["gmm_input"]
		return dict((field, section[field]) for field in GMM_INPUT_FIELDS)

	@classmethod
	def create(cls, **kwargs):
		"""
		Construct input, taking unspecified fields from the configuration

		:raises TypeError:
			if a keyword is not a field name
		"""
		unknown = set(kwargs) - set(GMM_INPUT_FIELDS)
		if unknown:
			raise TypeError("Unknown GmmInput field(s): %s"
							% ", ".join(sorted(unknown)))
		values = cls.defaults()
		values.update(kwargs)
		return cls(**values)

	@classmethod
	def builder(cls):
		return GmmInputBuilder()


class GmmInputBuilder(object):
	"""
	Incremental construction of :class:`GmmInput`. Setters return
	the builder, so calls can be chained::

		gmm_input = GmmInput.builder().mag(8.0).distances(100., 100., 100.).build()
	"""
	def __init__(self):
		self._values = {}

	def mag(self, Mw):
		self._values['Mw'] = Mw
		return self

	def distances(self, rJB, rRup, rX):
		self._values.update(rJB=rJB, rRup=rRup, rX=rX)
		return self

	def rJB(self, rJB):
		self._values['rJB'] = rJB
		return self

	def rRup(self, rRup):
		self._values['rRup'] = rRup
		return self

	def rX(self, rX):
		self._values['rX'] = rX
		return self

	def dip(self, dip):
		self._values['dip'] = dip
		return self

	def width(self, width):
		self._values['width'] = width
		return self

	def zTop(self, zTop):
		self._values['zTop'] = zTop
		return self

	def zHyp(self, zHyp):
		self._values['zHyp'] = zHyp
		return self

	def rake(self, rake):
		self._values['rake'] = rake
		return self

	def vs30(self, vs30, vsInf=None):
		self._values['vs30'] = vs30
		if vsInf is not None:
			self._values['vsInf'] = vsInf
		return self

	def z1p0(self, z1p0):
		self._values['z1p0'] = z1p0
		return self

	def z2p5(self, z2p5):
		self._values['z2p5'] = z2p5
		return self

	def from_input(self, gmm_input):
		"""
		Copy all fields from an existing input
		"""
		self._values.update(gmm_input._asdict())
		return self

	def build(self):
		return GmmInput.create(**self._values)
