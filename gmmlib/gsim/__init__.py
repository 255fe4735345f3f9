"""
gsim submodule: ground-motion model contract, registry and models
"""


## base (depends on imt)
from . import base
from .base import *

## coefficients (depends on base)
from . import coefficients
from .coefficients import *

## gmm_input (depends on config)
from . import gmm_input
from .gmm_input import *

## ground_motion (no internal dependencies)
from . import ground_motion
from .ground_motion import *

## registry (depends on base)
from . import registry
from .registry import *

## gmpe (depends on base, coefficients, ground_motion, registry)
from . import gmpe
from .gmpe import *

## supplier (depends on registry)
from . import supplier
from .supplier import *

## spectrum (depends on registry)
from . import spectrum
from .spectrum import *

## plot (depends on spectrum)
from . import plot
from .plot import *

## oqhazlib (requires openquake.hazardlib when used)
from . import oqhazlib
from .oqhazlib import *
