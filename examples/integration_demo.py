#!/usr/bin/env python3
"""Simple Monte Carlo Integration Example

Estimate pi as the area under the quarter circle h(x) = 4 * sqrt(1 - x^2).
"""

import math
from mc_importance import CrudeMonteCarlo


def quarter_circle(x):
    return 4 * math.sqrt(1 - x * x)


integrator = CrudeMonteCarlo(seed=42)

for n_samples in [100, 10_000, 1_000_000]:
    estimate = integrator.integrate(quarter_circle, n_samples)
    print(
        f"n = {n_samples:>9,}   pi ~ {estimate:.6f}   "
        f"error = {abs(estimate - math.pi):.2e}"
    )
