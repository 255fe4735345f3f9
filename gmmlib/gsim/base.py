"""
Ground-motion model contract and error definitions
"""

import abc

from ..imt import Imt



__all__ = ['GroundMotionModel', 'GmmError', 'MissingCoefficientsError',
			'UnsupportedConfigurationError', 'GmmConfigError',
			'DirectInstantiationError']


## Error definitions
class GmmError(Exception):
	"""
	Base class for errors raised while resolving ground-motion models
	"""
	pass


class MissingCoefficientsError(GmmError, KeyError):
	def __init__(self, model, imt, name=None):
		super(MissingCoefficientsError, self).__init__("")
		self.model = model
		self.imt = imt
		self.name = name

	def __str__(self):
		if self.name:
			return "Coefficient %s missing for %s in model %s!" % (self.name,
																self.imt, self.model)
		return "No coefficients for %s in model %s!" % (self.imt, self.model)


class UnsupportedConfigurationError(GmmError, ValueError):
	def __init__(self, model_id, imt=None, reason=""):
		super(UnsupportedConfigurationError, self).__init__("")
		self.model_id = model_id
		self.imt = imt
		self.reason = reason

	def __str__(self):
		if self.imt is None:
			msg = "Unknown ground-motion model %s" % self.model_id
		else:
			msg = "IMT %s not supported by ground-motion model %s" % (self.imt,
																	self.model_id)
		if self.reason:
			msg += " (%s)" % self.reason
		return msg + "!"


class GmmConfigError(GmmError):
	"""
	Broken model definition: missing coefficient resource, unreadable
	table or duplicate model identifier
	"""
	pass


class DirectInstantiationError(GmmError, TypeError):
	def __init__(self, cls):
		super(DirectInstantiationError, self).__init__("")
		self.cls = cls

	def __str__(self):
		return ("%s cannot be instantiated directly, use "
				"gmmlib.gsim.instance(model_id, imt)" % self.cls.__name__)


## Only the registry holds this token, so only the registry can construct
## models
_CONSTRUCTION_TOKEN = object()


class GroundMotionModel(abc.ABC):
	"""
	Base class for an empirical ground-motion model bound to one
	intensity measure type.

	Subclasses define the class attributes below and implement
	:meth:`calc`. They must not be instantiated directly: the registry
	(:func:`gmmlib.gsim.instance`) resolves coefficients for the requested
	IMT and constructs the model.

	Class attributes:
		ID: str, registry identifier (e.g. "AM_09_INTER")
		NAME: str, full name of the model
		COEFFS: instance of :class:`CoefficientTable`
		COEFF_NAMES: tuple of coefficient names required from COEFFS
			(default: empty tuple, no check)
		DISTANCE_METRIC: str, "rRup" or "rJB"
		Mtype: str, magnitude type
		Mmin, Mmax: floats, magnitude range of the underlying data
		dmin, dmax: floats, distance range (km) of the underlying data

	Valid magnitude and distance ranges are documentation only;
	:meth:`calc` extrapolates outside of them.
	"""
	ID = None
	NAME = None
	COEFFS = None
	COEFF_NAMES = ()
	DISTANCE_METRIC = "rRup"
	Mtype = "MW"
	Mmin, Mmax = None, None
	dmin, dmax = None, None

	def __init__(self, imt, token=None):
		"""
		:param imt:
			instance of :class:`gmmlib.imt.Imt`
		:param token:
			construction token, only known to the registry
		"""
		if token is not _CONSTRUCTION_TOKEN:
			raise DirectInstantiationError(self.__class__)
		object.__setattr__(self, "imt", imt)
		object.__setattr__(self, "coeffs", self._resolve_coeffs(imt))
		self._init_coeffs(imt)
		object.__setattr__(self, "_frozen", True)

	def _resolve_coeffs(self, imt):
		return self.COEFFS.get(imt, names=self.COEFF_NAMES)

	def _init_coeffs(self, imt):
		"""
		Hook for models that need more than one coefficient table.
		Use :meth:`_bind` to attach additional attributes.
		"""
		pass

	def _bind(self, name, value):
		if getattr(self, "_frozen", False):
			raise AttributeError("%s is immutable" % self.__class__.__name__)
		object.__setattr__(self, name, value)

	def __setattr__(self, name, value):
		raise AttributeError("%s is immutable" % self.__class__.__name__)

	def __delattr__(self, name):
		raise AttributeError("%s is immutable" % self.__class__.__name__)

	def __repr__(self):
		return '<%s %s>' % (self.ID, self.imt)

	def __str__(self):
		return "%s [%s]" % (self.NAME, self.imt)

	@classmethod
	def supported_imts(cls):
		"""
		Set of intensity measure types with a coefficient row
		"""
		return cls.COEFFS.imts

	@classmethod
	def has_imt(cls, imt):
		"""
		Check if given intensity measure type is supported.

		:param imt:
			instance of :class:`Imt` or str understood by :meth:`Imt.parse`
		"""
		try:
			imt = Imt.parse(imt)
		except ValueError:
			return False
		return imt in cls.supported_imts()

	@abc.abstractmethod
	def calc(self, gmm_input):
		"""
		Compute ground-motion distribution

		:param gmm_input:
			instance of :class:`gmmlib.gsim.GmmInput`

		:return:
			instance of :class:`gmmlib.gsim.ScalarGroundMotion`, with mean
			and sigma in natural-log units
		"""
		pass
