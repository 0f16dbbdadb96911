"""mc-importance - Monte Carlo integration with crude and importance sampling.

This library estimates definite integrals over [0, 1] by averaging the
integrand at pseudo-random points, either drawn uniformly (crude Monte Carlo)
or from a proposal distribution and reweighted by its density (importance
sampling).

Example:
    >>> import math
    >>> from mc_importance import CrudeMonteCarlo, ImportanceSampler, Proposal
    >>>
    >>> h = lambda x: 4 * math.sqrt(1 - x * x)  # integral over [0, 1] is pi
    >>> crude = CrudeMonteCarlo(seed=42)
    >>> importance = ImportanceSampler(Proposal.linear(seed=42))
    >>> print(f"crude      = {crude.integrate(h, 100_000):.4f}")
    >>> print(f"importance = {importance.integrate(h, 100_000):.4f}")
"""

from .integrators import CrudeMonteCarlo, ImportanceSampler, Integrator
from .proposals import Proposal

__version__ = "0.1.0"

__all__ = [
    "Integrator",
    "CrudeMonteCarlo",
    "ImportanceSampler",
    "Proposal",
]
