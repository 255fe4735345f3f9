"""
Suppliers of transforms

A :class:`TransformSupplier` hands out a :class:`Transform` for a given
argument. Batch drivers use this to obtain per-model functions mapping
ground-motion inputs to ground-motion distributions.
"""

import abc

from ..imt import Imt
from .registry import get_registry



__all__ = ['Transform', 'TransformSupplier', 'GroundMotionTransform',
			'GroundMotionSupplier']


class Transform(abc.ABC):
	"""
	Function object converting a value of one type into another
	"""
	@abc.abstractmethod
	def apply(self, value):
		pass

	def __call__(self, value):
		return self.apply(value)


class TransformSupplier(abc.ABC):
	"""
	Factory of :class:`Transform` instances
	"""
	@abc.abstractmethod
	def get(self, from_):
		"""
		:param from_:
			object determining the transform to supply

		:return:
			instance of :class:`Transform`
		"""
		pass


class GroundMotionTransform(Transform):
	"""
	Transform from :class:`GmmInput` to :class:`ScalarGroundMotion`,
	using one ground-motion model

	:param model:
		instance of :class:`GroundMotionModel`
	"""
	def __init__(self, model):
		self.model = model

	def __repr__(self):
		return '<GroundMotionTransform %r>' % self.model

	def apply(self, value):
		"""
		:param value:
			instance of :class:`GmmInput`, or iterable of them

		:return:
			instance of :class:`ScalarGroundMotion`, or list of them
			if value is an iterable of inputs
		"""
		if hasattr(value, "Mw"):
			return self.model.calc(value)
		return [self.model.calc(gmm_input) for gmm_input in value]


class GroundMotionSupplier(TransformSupplier):
	"""
	Supplies :class:`GroundMotionTransform` instances for one intensity
	measure type, by model identifier

	:param imt:
		instance of :class:`Imt` or str understood by :meth:`Imt.parse`
	:param registry:
		instance of :class:`ModelRegistry`
		(default: None, use default registry)
	"""
	def __init__(self, imt, registry=None):
		self.imt = Imt.parse(imt)
		self.registry = registry or get_registry()

	def get(self, from_):
		"""
		:param from_:
			str, model identifier

		:raises UnsupportedConfigurationError:
			if the model is unknown or does not support the IMT
		"""
		return GroundMotionTransform(self.registry.instance(from_, self.imt))
