"""
Sampling of single-variable expressions.

Produces the (x, y) series a 2-D line plot would draw. Rendering itself is
left to the caller.
"""

import numpy as np
from typing import Tuple, Union

from .expression_tree.core.node import Node
from .expression_tree.expression import Expression
from .logging_system import LogLevel, log_info, log_progress


def sample_2d(expression: Union[Expression, Node], variable: str,
              domain: Tuple[float, float], grain: float) -> np.ndarray:
    """
    Evaluate expression across a domain.

    Args:
        expression: Expression with `variable` as its only free variable
        variable: Name of the variable to sweep
        domain: (start, end) of the sweep, end excluded
        grain: Samples per unit of the domain

    Returns:
        Array of shape (n, 2) holding (x, y) rows

    Raises:
        UnresolvedEvaluationError: a sample did not reduce to a constant
    """
    if grain <= 0:
        raise ValueError(f"grain must be positive, got {grain}")
    start, end = domain
    steps = np.arange(int(start * grain), int(end * grain))
    if steps.size == 0:
        raise ValueError(f"Domain {domain} holds no samples at grain {grain}")

    root = expression.root if isinstance(expression, Expression) else expression
    xs = steps / grain
    samples = np.empty((xs.size, 2), dtype=np.float64)
    for index, x in enumerate(xs):
        samples[index, 0] = x
        samples[index, 1] = float(root.evaluate({variable: x}))
        log_progress(f"sampled {index + 1}/{xs.size} points")

    log_info(f"Sampled {root.to_string()} at {xs.size} points over {domain}", LogLevel.DETAILED)
    return samples


def value_range(samples: np.ndarray) -> Tuple[float, float]:
    """(min, max) of the y column"""
    if samples.size == 0:
        raise ValueError("No samples")
    return float(np.min(samples[:, 1])), float(np.max(samples[:, 1]))
