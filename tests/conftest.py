"""Hypothesis strategies and pytest fixtures for fallible.

Strategies are composable: results are built from outcomes, outcomes from
plain values and error values.
"""

from __future__ import annotations

import os
from typing import Any

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from fallible.core.errors import ResultError
from fallible.core.outcome import Err, Ok, Outcome
from fallible.result.computation import Result
from fallible.result.interop import from_outcome

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


# ===================================================================
# PRIMITIVE STRATEGIES
# ===================================================================


def error_values() -> SearchStrategy[Any]:
    """Plain error payloads: strings, codes, or structured ResultErrors."""
    return st.one_of(
        st.text(max_size=20),
        st.integers(min_value=400, max_value=599),
        st.builds(
            ResultError,
            message=st.text(min_size=1, max_size=20),
            code=st.sampled_from(["E001", "E002", "WRAPPED"]),
        ),
    )


# ===================================================================
# OUTCOME / RESULT STRATEGIES
# ===================================================================


@st.composite
def outcomes(
    draw: st.DrawFn,
    values: SearchStrategy[Any] | None = None,
) -> Outcome[Any, Any]:
    """Generate exactly one Outcome variant (Ok | Err)."""
    if values is None:
        values = st.integers()
    if draw(st.booleans()):
        return Ok(draw(values))
    return Err(draw(error_values()))


@st.composite
def results(
    draw: st.DrawFn,
    values: SearchStrategy[Any] | None = None,
) -> Result[Any, Any]:
    """Generate a Result that always resolves to the same drawn Outcome."""
    return from_outcome(draw(outcomes(values)))
