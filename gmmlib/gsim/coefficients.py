"""
Period-dependent regression coefficients

Coefficient tables are CSV files in the gmpe/coeffs folder. The first
column (header "T") holds the IMT key ("PGA", "PGV", "PGD" or a spectral
period in seconds), the remaining columns are named coefficients.
Each file is parsed at most once per process.
"""

import os
import logging
import threading
from collections.abc import Mapping

import numpy as np

from ..imt import Imt
from .base import MissingCoefficientsError, GmmConfigError



__all__ = ['CoefficientTable', 'Coefficients', 'load_table',
			'clear_table_cache', 'COEFFS_FOLDER']


log = logging.getLogger(__name__)

COEFFS_FOLDER = os.path.join(os.path.dirname(os.path.realpath(__file__)),
							"gmpe", "coeffs")

## Process-wide cache: table name -> (column names, {Imt: {name: value}})
_tables = {}
_tables_lock = threading.Lock()


def _parse_table(filespec):
	"""
	Parse CSV coefficient file

	:param filespec:
		str, full path to CSV file

	:return:
		(names, rows) tuple:
		- names: tuple of coefficient names, in column order
		- rows: dict mapping instances of :class:`Imt` to dicts
		mapping coefficient names to floats
	"""
	data = np.genfromtxt(filespec, delimiter=",", names=True, dtype=None,
						encoding="utf-8", autostrip=True)
	data = np.atleast_1d(data)
	key_name = data.dtype.names[0]
	names = tuple(data.dtype.names[1:])

	rows = {}
	for rec in data:
		key = rec[key_name]
		try:
			imt = Imt.parse(key)
		except ValueError:
			raise GmmConfigError("Unrecognized IMT key %r in %s"
								% (key, os.path.basename(filespec)))
		if imt in rows:
			raise GmmConfigError("Duplicate row for %s in %s"
								% (imt, os.path.basename(filespec)))
		rows[imt] = dict((name, float(rec[name])) for name in names)
	return names, rows


def load_table(name):
	"""
	Load coefficient table from the coeffs folder, using the
	process-wide cache

	:param name:
		str, file name of the table (e.g. "AM09.csv")

	:return:
		(names, rows) tuple, see :func:`_parse_table`.
		Do not modify the returned objects.

	:raises GmmConfigError:
		if the file does not exist or cannot be parsed
	"""
	with _tables_lock:
		if name not in _tables:
			filespec = os.path.join(COEFFS_FOLDER, name)
			if not os.path.isfile(filespec):
				raise GmmConfigError("Coefficient table %s not found" % name)
			log.debug("Loading coefficient table %s", filespec)
			_tables[name] = _parse_table(filespec)
		return _tables[name]


def clear_table_cache():
	"""
	Drop all cached tables (only useful in tests)
	"""
	with _tables_lock:
		_tables.clear()


class Coefficients(Mapping):
	"""
	Immutable set of named coefficients of one model for one IMT.
	Values can be accessed as items (C['c0']) or attributes (C.c0).

	:param model:
		str, name of the model the coefficients belong to
	:param imt:
		instance of :class:`Imt`
	:param values:
		dict, mapping coefficient names to floats
	"""
	__slots__ = ('_model', '_imt', '_values')

	def __init__(self, model, imt, values):
		object.__setattr__(self, '_model', model)
		object.__setattr__(self, '_imt', imt)
		object.__setattr__(self, '_values', dict(values))

	@property
	def model(self):
		return self._model

	@property
	def imt(self):
		return self._imt

	def __getitem__(self, name):
		return self._values[name]

	def __iter__(self):
		return iter(self._values)

	def __len__(self):
		return len(self._values)

	def __getattr__(self, name):
		if name.startswith('_'):
			raise AttributeError(name)
		try:
			return self._values[name]
		except KeyError:
			raise AttributeError(name)

	def __setattr__(self, name, value):
		raise AttributeError("Coefficients are immutable")

	def __eq__(self, other):
		if not isinstance(other, Coefficients):
			return NotImplemented
		return ((self._model, self._imt, self._values)
				== (other._model, other._imt, other._values))

	def __ne__(self, other):
		result = self.__eq__(other)
		if result is NotImplemented:
			return result
		return not result

	def __hash__(self):
		return hash((self._model, self._imt, tuple(sorted(self._values.items()))))

	def __repr__(self):
		return '<Coefficients %s %s>' % (self._model, self._imt)


class CoefficientTable(object):
	"""
	Handle on a coefficient table. The table itself is only read
	on first access.

	:param name:
		str, file name of the table in the coeffs folder
	:param model:
		str, name of the model using the table, used in error messages
		(default: None, use table name)
	"""
	def __init__(self, name, model=None):
		self.name = name
		self.model = model or name

	def __repr__(self):
		return '<CoefficientTable %s>' % self.name

	@property
	def names(self):
		"""
		Tuple of coefficient names
		"""
		return load_table(self.name)[0]

	@property
	def imts(self):
		"""
		Frozen set of intensity measure types with a row in the table
		"""
		return frozenset(load_table(self.name)[1].keys())

	def get(self, imt, names=()):
		"""
		Fetch coefficients for given IMT

		:param imt:
			instance of :class:`Imt`
		:param names:
			list of coefficient names that must be present
			(default: (), no check)

		:return:
			instance of :class:`Coefficients`

		:raises MissingCoefficientsError:
			if the table has no row for imt, or lacks one of names
		"""
		rows = load_table(self.name)[1]
		try:
			row = rows[imt]
		except KeyError:
			raise MissingCoefficientsError(self.model, imt)
		for name in names:
			if name not in row:
				raise MissingCoefficientsError(self.model, imt, name=name)
		return Coefficients(self.model, imt, row)
