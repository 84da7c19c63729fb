"""Utility functions for the project."""

import string

import numpy as np
import numpy.typing as npt

ALPHABET = np.array(list(string.ascii_lowercase))


def random_strings(
    rng: np.random.Generator, count: int, length: int
) -> list[str]:
    """Draw ``count`` random lowercase strings of exactly ``length`` characters."""
    letters = rng.choice(ALPHABET, size=(count, length))
    return ["".join(row) for row in letters]


def summarize(durations: npt.NDArray[np.float64]) -> tuple[float, float]:
    """Mean and standard deviation of a series of durations."""
    return float(np.mean(durations)), float(np.std(durations))
