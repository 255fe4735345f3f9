"""
Shared fixtures for the gmmlib test suite
"""

import matplotlib
matplotlib.use("Agg")

import pytest

from gmmlib.config import reset_config
from gmmlib.gsim import GmmInput, ModelRegistry, clear_table_cache


@pytest.fixture
def registry():
	"""
	Fresh registry, independent of the process-wide one
	"""
	return ModelRegistry()


@pytest.fixture
def config_reset():
	"""
	Drop cached configuration before and after the test
	"""
	reset_config()
	yield
	reset_config()


@pytest.fixture
def table_cache_reset():
	clear_table_cache()
	yield
	clear_table_cache()


@pytest.fixture
def scenario():
	"""
	Mw 6.5 scenario at 50 km on a 760 m/s site
	"""
	return GmmInput.create(Mw=6.5, rJB=50., rRup=50., rX=50., vs30=760.)
