#!/usr/bin/env python3
"""Compare crude Monte Carlo and importance sampling on the quarter circle.

The target h(x) = 4 * sqrt(1 - x^2) integrates to pi over [0, 1]. Both
strategies estimate it with the same sample count and the result is
printed as a two-row table of estimate and absolute error.

Usage:
    $ mc-importance
    $ python -m mc_importance.driver
"""

import logging
import math
import sys
from typing import Callable, List, NamedTuple, Optional, Sequence, TextIO

import numpy as np

from .integrators import CrudeMonteCarlo, ImportanceSampler, Integrator
from .proposals import Proposal

logger = logging.getLogger(__name__)

N_SAMPLES = 10_000
EXACT_VALUE = math.pi

METHOD_WIDTH = 15
ESTIMATE_WIDTH = 20
RULE = "=" * 53


def target(x: float) -> float:
    """Quarter-circle integrand, whose integral over [0, 1] is pi."""
    return 4 * math.sqrt(1 - x * x)


def proposal_pdf(x: float) -> float:
    return 2 * (1 - x)


def proposal_inverse_cdf(u: float) -> float:
    # G(x) = 1 - (1 - x)^2
    return 1 - math.sqrt(1 - u)


class ComparisonRow(NamedTuple):
    method: str
    estimate: float
    error: float


def compare(
    integrators: Sequence[Integrator],
    h: Callable[[float], float],
    n_samples: int,
    exact: float,
) -> List[ComparisonRow]:
    """Run every integrator on h and measure its absolute error against exact."""
    rows = []
    for integrator in integrators:
        estimate = integrator.integrate(h, n_samples)
        error = abs(estimate - exact)
        if not np.isfinite(estimate):
            logger.warning(
                "%s produced a non-finite estimate: %r", integrator.name, estimate
            )
        logger.info("%s: estimate=%r error=%r", integrator.name, estimate, error)
        rows.append(ComparisonRow(integrator.name, estimate, error))
    return rows


def render_table(rows: Sequence[ComparisonRow]) -> str:
    """Format comparison rows as the fixed-width method/estimate/error table.

    Numbers use six significant digits; nan and inf are shown as-is.
    """
    lines = [
        f"{'Method':<{METHOD_WIDTH}}|{'Estimate':<{ESTIMATE_WIDTH}}|Error",
        RULE,
    ]
    for row in rows:
        lines.append(
            f"{row.method:<{METHOD_WIDTH}}|{row.estimate:<{ESTIMATE_WIDTH}g}|{row.error:g}"
        )
    return "\n".join(lines) + "\n"


def build_integrators(seed: Optional[int] = None) -> List[Integrator]:
    """Crude and importance strategies with independent engines.

    With a seed, the two engines are spawned from one SeedSequence so a
    run is reproducible; without one, both are seeded from OS entropy.
    """
    crude_seed, proposal_seed = np.random.SeedSequence(seed).spawn(2)
    proposal = Proposal.from_inverse_cdf(
        proposal_pdf,
        proposal_inverse_cdf,
        rng=np.random.default_rng(proposal_seed),
        name="linear",
    )
    return [
        CrudeMonteCarlo(rng=np.random.default_rng(crude_seed)),
        ImportanceSampler(proposal),
    ]


def main(
    n_samples: int = N_SAMPLES,
    seed: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> List[ComparisonRow]:
    """Estimate pi both ways and print the comparison table."""
    if stream is None:
        stream = sys.stdout

    logger.info("Integrating quarter circle with n=%d", n_samples)
    rows = compare(build_integrators(seed), target, n_samples, EXACT_VALUE)

    stream.write("\n\n")
    stream.write(render_table(rows))
    return rows


def run() -> None:
    """Console entry point."""
    logging.basicConfig(level=logging.WARNING)
    main()


if __name__ == "__main__":
    run()
