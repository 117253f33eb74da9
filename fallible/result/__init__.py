"""fallible.result — deferred computations and their combinators."""

from fallible.result.computation import (
    Result as Result,
)
from fallible.result.computation import (
    ap as ap,
)
from fallible.result.computation import (
    ap_first as ap_first,
)
from fallible.result.computation import (
    ap_second as ap_second,
)
from fallible.result.computation import (
    bimap as bimap,
)
from fallible.result.computation import (
    chain as chain,
)
from fallible.result.computation import (
    chain_first as chain_first,
)
from fallible.result.computation import (
    error as error,
)
from fallible.result.computation import (
    filter_or_else as filter_or_else,
)
from fallible.result.computation import (
    fold as fold,
)
from fallible.result.computation import (
    fork as fork,
)
from fallible.result.computation import (
    get_or_else as get_or_else,
)
from fallible.result.computation import (
    map_error as map_error,
)
from fallible.result.computation import (
    map_result as map_result,
)
from fallible.result.computation import (
    ok as ok,
)
from fallible.result.computation import (
    or_else as or_else,
)
from fallible.result.computation import (
    zero as zero,
)
from fallible.result.interop import (
    from_io as from_io,
)
from fallible.result.interop import (
    from_outcome as from_outcome,
)
from fallible.result.interop import (
    sequence as sequence,
)
from fallible.result.interop import (
    try_catch as try_catch,
)
from fallible.result.nilable import (
    from_nilable as from_nilable,
)
from fallible.result.nilable import (
    missing as missing,
)
