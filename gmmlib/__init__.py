# gmmlib: Ground-Motion Model library

"""
gmmlib: Ground-Motion Model library

gmmlib is a python library of empirical ground-motion models (GMMs),
predicting the log-normal distribution of an intensity measure (PGA,
PGV, spectral acceleration) for an earthquake scenario.

Models are obtained from the registry by identifier and intensity
measure type, e.g.:

	from gmmlib import Imt
	from gmmlib.gsim import instance, GmmInput
	model = instance("AM_09_INTER", Imt.PGA)
	gm = model.calc(GmmInput.create(Mw=8.0, rRup=100.))
"""

import logging


## Library logging is silent unless the application configures it
## (see config.configure_logging)
logging.getLogger(__name__).addHandler(logging.NullHandler())


## Import submodules
## Submodules should be loaded in order of inter-dependency,
## i.e. a submodule depending on another one, should be loaded after that one.

## imt (no internal dependencies)
from . import imt
from .imt import *

## utils (no internal dependencies)
from . import utils

## config (no internal dependencies)
from . import config
from .config import configure_logging

## gsim (depends on imt, utils, config)
from . import gsim
