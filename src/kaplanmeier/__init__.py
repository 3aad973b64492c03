__version__ = "0.1.0"

from .aggregate import aggregate
from .errors import EmptyInput
from .errors import KaplanMeierError
from .errors import ShapeMismatch
from .estimator import KaplanMeier
from .estimator import NonparametricEstimator
from .estimator import fit
from .prepare import SortedSample
from .prepare import prepare
from .propertyset import PropertySet
from .table import SurvivorFunctionTable

__all__ = [
    "EmptyInput",
    "KaplanMeier",
    "KaplanMeierError",
    "NonparametricEstimator",
    "PropertySet",
    "ShapeMismatch",
    "SortedSample",
    "SurvivorFunctionTable",
    "__version__",
    "aggregate",
    "fit",
    "prepare",
]
