import contextlib

# The claw hook must be installed before any sub-module is imported.
with contextlib.suppress(Exception):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package
    if os.environ.get("BELLAMY_FP_BEARTYPE_THIS_PACKAGE", "0").strip() == "1":
        beartype_this_package()
    if os.environ.get("BELLAMY_FP_BEARTYPE_ALL", "0").strip() == "1":
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))

from . import arrays, interop, option, result
from .arrays import (
    append,
    chunk,
    concat,
    group_by,
    head,
    last,
    prepend,
    range,
    sort_by,
    tail,
    unique,
    zip,
)
from .arrays import filter as filter_array
from .arrays import flat_map as flat_map_array
from .arrays import map as map_array
from .arrays import reduce as reduce_array
from .config import RuntimeSettings
from .exceptions import FpError, UnwrapError
from .option import (
    Nothing,
    Option,
    Some,
    from_nullable,
    is_none,
    is_some,
    none,
    some,
)
from .option import filter as filter_option
from .option import flat_map as flat_map_option
from .option import fold as fold_option
from .option import get_or_else as get_or_else_option
from .option import map as map_option
from .pipe import Pipe, compose, curry, flow, identity, partial, pipe
from .result import (
    Failure,
    Result,
    Success,
    failure,
    success,
    try_catch,
    try_catch_async,
)
from .result import flat_map as flat_map_result
from .result import fold as fold_result
from .result import get_or_else as get_or_else_result
from .result import map as map_result

settings = RuntimeSettings.from_env()

__all__: list[str] = [
    "Failure",
    "FpError",
    "Nothing",
    "Option",
    "Pipe",
    "Result",
    "RuntimeSettings",
    "Some",
    "Success",
    "UnwrapError",
    "append",
    "arrays",
    "chunk",
    "compose",
    "concat",
    "curry",
    "failure",
    "filter_array",
    "filter_option",
    "flat_map_array",
    "flat_map_option",
    "flat_map_result",
    "flow",
    "fold_option",
    "fold_result",
    "from_nullable",
    "get_or_else_option",
    "get_or_else_result",
    "group_by",
    "head",
    "identity",
    "interop",
    "is_none",
    "is_some",
    "last",
    "map_array",
    "map_option",
    "map_result",
    "none",
    "option",
    "partial",
    "pipe",
    "prepend",
    "range",
    "reduce_array",
    "result",
    "settings",
    "some",
    "sort_by",
    "success",
    "tail",
    "try_catch",
    "try_catch_async",
    "unique",
    "zip",
]
