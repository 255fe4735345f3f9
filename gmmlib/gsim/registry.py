"""
Registry of ground-motion models

The registry is the only way to obtain a model instance. It resolves the
coefficients for a (model, IMT) pair, constructs the model once and
caches it for the lifetime of the registry.
"""

import logging
import threading

from ..imt import Imt
from .base import (GroundMotionModel, GmmConfigError,
					UnsupportedConfigurationError, _CONSTRUCTION_TOKEN)



__all__ = ['ModelRegistry', 'register_gmm', 'get_registry', 'instance',
			'model_ids']


log = logging.getLogger(__name__)

## Model classes by ID, filled by :func:`register_gmm`
_model_classes = {}
_classes_lock = threading.Lock()


def register_gmm(cls):
	"""
	Class decorator adding a ground-motion model to the registry

	:param cls:
		subclass of :class:`GroundMotionModel` with a unique ID

	:return:
		cls
	"""
	if not (isinstance(cls, type) and issubclass(cls, GroundMotionModel)):
		raise GmmConfigError("%r is not a GroundMotionModel" % (cls,))
	if not cls.ID:
		raise GmmConfigError("%s has no ID" % cls.__name__)
	model_id = cls.ID.upper()
	with _classes_lock:
		if model_id in _model_classes and _model_classes[model_id] is not cls:
			raise GmmConfigError("Duplicate ground-motion model ID %s (%s, %s)"
						% (model_id, _model_classes[model_id].__name__, cls.__name__))
		_model_classes[model_id] = cls
	return cls


def model_ids():
	"""
	Return sorted list of registered model IDs
	"""
	with _classes_lock:
		return sorted(_model_classes.keys())


class ModelRegistry(object):
	"""
	Cache of model instances, keyed by (model ID, IMT).

	At most one instance is constructed per key, also when several
	threads request the same key for the first time. Instances are
	immutable and can be shared freely.
	"""
	def __init__(self):
		self._instances = {}
		self._lock = threading.Lock()

	def __len__(self):
		with self._lock:
			return len(self._instances)

	def __contains__(self, key):
		model_id, imt = key
		try:
			key = self._make_key(model_id, imt)
		except UnsupportedConfigurationError:
			return False
		with self._lock:
			return key in self._instances

	def __repr__(self):
		return '<ModelRegistry (%d instances)>' % len(self)

	def model_class(self, model_id):
		"""
		Return model class registered under model_id

		:param model_id:
			str, model identifier (case-insensitive)

		:raises UnsupportedConfigurationError:
			if model_id is unknown
		"""
		key = str(model_id).upper()
		with _classes_lock:
			try:
				return _model_classes[key]
			except KeyError:
				raise UnsupportedConfigurationError(model_id)

	def supported_imts(self, model_id):
		"""
		Return frozen set of IMTs supported by a model
		"""
		return self.model_class(model_id).supported_imts()

	def _make_key(self, model_id, imt):
		cls = self.model_class(model_id)
		try:
			imt = Imt.parse(imt)
		except ValueError as exc:
			raise UnsupportedConfigurationError(cls.ID, imt, reason=str(exc))
		if imt not in cls.supported_imts():
			raise UnsupportedConfigurationError(cls.ID, imt)
		return (cls.ID.upper(), imt)

	def instance(self, model_id, imt):
		"""
		Return model bound to the coefficients for imt

		:param model_id:
			str, model identifier (case-insensitive), see :func:`model_ids`
		:param imt:
			instance of :class:`Imt` or str understood by :meth:`Imt.parse`

		:return:
			instance of :class:`GroundMotionModel`

		:raises UnsupportedConfigurationError:
			if model_id is unknown or the model does not support imt
		:raises MissingCoefficientsError:
			if a coefficient table of the model lacks a row or value for imt
		"""
		key = self._make_key(model_id, imt)
		with self._lock:
			model = self._instances.get(key)
			if model is None:
				cls = self.model_class(key[0])
				log.debug("Constructing %s for %s", cls.ID, key[1])
				model = cls(key[1], token=_CONSTRUCTION_TOKEN)
				self._instances[key] = model
			return model

	def clear(self):
		"""
		Drop all cached instances
		"""
		with self._lock:
			self._instances.clear()


_registry = ModelRegistry()


def get_registry():
	"""
	Return process-wide default registry
	"""
	return _registry


def instance(model_id, imt):
	"""
	Return model instance from the default registry.
	See :meth:`ModelRegistry.instance`
	"""
	return _registry.instance(model_id, imt)
