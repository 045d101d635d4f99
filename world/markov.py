# markov.py
"""
Transition matrix helpers for the weather Markov chain.

A transition matrix maps today's weather to a probability distribution over
tomorrow's weather. Rows are plain dicts keyed by WeatherState and iterated in
enumeration order (Sunny, Cloudy, Rainy).
"""
from __future__ import annotations

import random
from collections import Counter
from typing import Dict, Mapping, Optional, Sequence

import numpy as np

from config import (
    PRIOR_TRANSITIONS,
    DISPLAY_LIMIT,
    SMOOTHING_ALPHA,
    ROW_SUM_TOLERANCE,
)
from world.states import WeatherState, InvalidStateValueError

Distribution = Dict[WeatherState, float]
TransitionMatrix = Dict[WeatherState, Distribution]

STATES = tuple(WeatherState)


def prior_matrix() -> TransitionMatrix:
    """Return a fresh copy of the fixed prior matrix."""
    return {
        WeatherState.parse(source): {WeatherState.parse(t): p for t, p in row.items()}
        for source, row in PRIOR_TRANSITIONS.items()
    }


def matrix_to_array(matrix: Mapping[WeatherState, Mapping[WeatherState, float]]) -> np.ndarray:
    """Dense (3, 3) array, rows and columns in enumeration order."""
    return np.array(
        [[matrix[source][target] for target in STATES] for source in STATES],
        dtype=np.float64,
    )


def validate_matrix(matrix: Mapping) -> TransitionMatrix:
    """Check a candidate matrix and return it keyed by WeatherState.

    Keys may be WeatherState values or their names. Every source and target
    must be present exactly once (two spellings of one state are rejected),
    probabilities must be finite and non-negative, and each row must sum to 1.
    """
    result: TransitionMatrix = {}
    try:
        for source_key, row in matrix.items():
            source = WeatherState.coerce(source_key)
            if source in result:
                raise InvalidStateValueError(f"Duplicate row for {source}: {source_key!r}")
            converted: Distribution = {}
            for target_key, p in row.items():
                target = WeatherState.coerce(target_key)
                if target in converted:
                    raise InvalidStateValueError(
                        f"Duplicate column {target} in row {source}: {target_key!r}")
                converted[target] = float(p)
            result[source] = converted
    except InvalidStateValueError:
        raise
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidStateValueError(f"Malformed transition matrix: {exc}") from exc

    for source in STATES:
        row = result.get(source)
        if row is None or set(row) != set(STATES):
            raise InvalidStateValueError(f"Row {source} must cover {', '.join(map(str, STATES))}")

    # Re-order rows and columns so iteration order is the enumeration order
    result = {source: {target: result[source][target] for target in STATES} for source in STATES}

    values = matrix_to_array(result)
    if not np.all(np.isfinite(values)) or np.any(values < 0):
        raise InvalidStateValueError("Transition probabilities must be finite and non-negative")
    sums = values.sum(axis=1)
    if not np.allclose(sums, 1.0, rtol=0.0, atol=ROW_SUM_TOLERANCE):
        raise InvalidStateValueError(f"Transition rows must sum to 1, got {sums.tolist()}")
    return result


def row_sums(matrix: TransitionMatrix) -> Distribution:
    return {source: sum(row.values()) for source, row in matrix.items()}


def count_recent(history: Sequence[WeatherState], window: int = DISPLAY_LIMIT) -> Dict[WeatherState, int]:
    """Occurrences of each state over the last `window` entries."""
    counts = Counter(list(history)[-window:]) if window > 0 else Counter()
    return {state: counts.get(state, 0) for state in STATES}


def reweighted_matrix(
    history: Sequence[WeatherState],
    window: int = DISPLAY_LIMIT,
) -> Optional[TransitionMatrix]:
    """Laplace-smoothed recent frequencies, used as every row of the matrix.

    Returns None when fewer than `window` days are known, leaving the caller's
    matrix untouched. The recent window is not conditioned on the source state,
    so all rows come out identical.
    """
    if len(history) < window:
        return None

    counts = count_recent(history, window)
    total = sum(counts.values())
    denominator = total + SMOOTHING_ALPHA * len(STATES)
    row = {target: (counts[target] + SMOOTHING_ALPHA) / denominator for target in STATES}
    return {source: dict(row) for source in STATES}


def choose_by_probability(distribution: Mapping[WeatherState, float], r: float) -> WeatherState:
    """Pick the first state whose cumulative probability reaches `r`.

    States with zero probability are never picked while a positive one exists.
    If float rounding leaves the running sum short of `r`, the last state with
    positive probability is returned rather than the last enumerated state,
    so a zero-probability transition can never be produced. Only an all-zero
    distribution falls back to the last enumerated state.
    """
    cumulative = 0.0
    fallback = None
    for state, probability in distribution.items():
        if probability <= 0:
            continue
        cumulative += probability
        fallback = state
        if r <= cumulative:
            return state

    if fallback is None:
        # All-zero row; nothing meaningful to choose from
        return list(distribution)[-1]
    return fallback


def sample_next(
    matrix: TransitionMatrix,
    from_state: WeatherState,
    rng: random.Random,
) -> WeatherState:
    """Draw tomorrow's weather given today's."""
    return choose_by_probability(matrix[from_state], rng.random())


def normalize(weights: Mapping[WeatherState, float]) -> Distribution:
    """Scale weights into a distribution; uniform when they sum to zero."""
    total = sum(weights.values())
    if total > 0:
        return {state: w / total for state, w in weights.items()}
    return {state: 1.0 / len(weights) for state in weights}
