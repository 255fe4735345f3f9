"""
Library configuration

Default values live in gmmlib.ini next to this module and are validated
against configspec.ini. A user file may override them, either passed to
:func:`load_config` or named in the GMMLIB_CONFIG environment variable.
"""

import os
import logging
import threading

from configobj import ConfigObj, flatten_errors
from validate import Validator



__all__ = ['ConfigError', 'load_config', 'get_config', 'reset_config',
			'configure_logging', 'CONFIG_ENV_VAR']


CONFIG_ENV_VAR = "GMMLIB_CONFIG"

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

_base_folder = os.path.dirname(os.path.realpath(__file__))
_default_filespec = os.path.join(_base_folder, "gmmlib.ini")
_configspec = os.path.join(_base_folder, "configspec.ini")

_config = None
_config_lock = threading.Lock()


class ConfigError(Exception):
	def __init__(self, filespec, errors):
		super(ConfigError, self).__init__("")
		self.filespec = filespec
		self.errors = errors

	def __str__(self):
		return "Invalid configuration in %s: %s" % (self.filespec,
												"; ".join(self.errors))


def _read(filespec, must_exist=True):
	try:
		return ConfigObj(filespec, configspec=_configspec, file_error=must_exist,
						interpolation=False, encoding="utf-8")
	except (IOError, OSError) as exc:
		raise ConfigError(filespec, [str(exc)])


def load_config(filespec=None):
	"""
	Read and validate configuration

	:param filespec:
		str, full path to user configuration file overriding the defaults
		(default: None, use GMMLIB_CONFIG environment variable if set,
		else defaults only)

	:return:
		instance of :class:`configobj.ConfigObj`, with values converted
		to their proper type

	:raises ConfigError:
		if the file does not exist or contains invalid values
	"""
	filespec = filespec or os.environ.get(CONFIG_ENV_VAR)
	config = _read(_default_filespec)
	if filespec:
		config.merge(_read(filespec))

	result = config.validate(Validator(), preserve_errors=True)
	if result is not True:
		errors = []
		for sections, key, error in flatten_errors(config, result):
			path = ".".join(list(sections) + [key or "<section>"])
			errors.append("%s: %s" % (path, error or "missing"))
		raise ConfigError(filespec or _default_filespec, errors)
	return config


def get_config():
	"""
	Return process-wide configuration, loading it on first use
	"""
	global _config
	with _config_lock:
		if _config is None:
			_config = load_config()
		return _config


def reset_config(config=None):
	"""
	Replace (or drop, if None) the process-wide configuration.
	Mainly useful in tests.

	:param config:
		instance of :class:`configobj.ConfigObj` as returned by
		:func:`load_config`
		(default: None)
	"""
	global _config
	with _config_lock:
		_config = config


def configure_logging(level=None, handler=None):
	"""
	Attach a handler to the package logger

	:param level:
		str or int, logging level
		(default: None, use level from configuration)
	:param handler:
		instance of :class:`logging.Handler`
		(default: None, will log to stderr)

	:return:
		instance of :class:`logging.Logger`, the package logger
	"""
	if level is None:
		level = get_config()["logging"]["level"]
	if handler is None:
		handler = logging.StreamHandler()
	handler.setFormatter(logging.Formatter(LOG_FORMAT))

	logger = logging.getLogger("gmmlib")
	logger.addHandler(handler)
	logger.setLevel(level)
	return logger
