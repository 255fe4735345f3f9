"""
gmpe submodule: ground-motion model implementations

Importing a model module registers its models with the registry.
Coefficient tables are in the coeffs folder.
"""

## Subduction
from . import atkinson_macias_2009
from .atkinson_macias_2009 import *

from . import zhao_2006
from .zhao_2006 import *

## Active shallow crust
from . import akkar_bommer_2010
from .akkar_bommer_2010 import *

## Stable continental
from . import campbell_2003
from .campbell_2003 import *

from . import toro_1997
from .toro_1997 import *
