"""fallible.core — outcome values, error values and shared aliases."""

from fallible.core.errors import (
    MissingValueError as MissingValueError,
)
from fallible.core.errors import (
    ResultError as ResultError,
)
from fallible.core.errors import (
    UnhandledExceptionError as UnhandledExceptionError,
)
from fallible.core.errors import (
    wrap as wrap,
)
from fallible.core.errors import (
    wrapper as wrapper,
)
from fallible.core.outcome import (
    Err as Err,
)
from fallible.core.outcome import (
    Ok as Ok,
)
from fallible.core.outcome import (
    Outcome as Outcome,
)
from fallible.core.outcome import (
    sequence_outcomes as sequence_outcomes,
)
from fallible.core.outcome import (
    unwrap as unwrap,
)
from fallible.core.types import (
    Nilable as Nilable,
)
from fallible.core.types import (
    Predicate as Predicate,
)
from fallible.core.types import (
    Thunk as Thunk,
)
