from . import tools
from ._core import Config, get_config, set_config
from ._eager import Seq
from ._errors import ConfigurationError, EmptyInputError, PyoiterError
from ._lazy import Iter, IterState
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some

__all__ = [
    "NONE",
    "Config",
    "ConfigurationError",
    "EmptyInputError",
    "Iter",
    "IterState",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "PyoiterError",
    "Seq",
    "Some",
    "get_config",
    "set_config",
    "tools",
]
