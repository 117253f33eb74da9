"""fallible — deferred, possibly-failing computations as composable values."""

import logging

from fallible.core import (
    Err as Err,
)
from fallible.core import (
    Ok as Ok,
)
from fallible.core import (
    Outcome as Outcome,
)
from fallible.core import (
    ResultError as ResultError,
)
from fallible.result import (
    Result as Result,
)
from fallible.result import (
    error as error,
)
from fallible.result import (
    from_nilable as from_nilable,
)
from fallible.result import (
    ok as ok,
)

__version__ = "0.1.0"

# Silent unless the application configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())
