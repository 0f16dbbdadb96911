"""Monte Carlo integration strategies over [0, 1].

Every strategy implements ``Integrator.integrate(h, n)``, which consumes
exactly ``n`` pseudo-random draws and returns a scalar estimate.

Example:
    >>> import math
    >>> from mc_importance import CrudeMonteCarlo, ImportanceSampler, Proposal
    >>>
    >>> h = lambda x: 4 * math.sqrt(1 - x * x)
    >>> CrudeMonteCarlo(seed=42).integrate(h, 10_000)  # ~3.1416
    >>> ImportanceSampler(Proposal.linear(seed=42)).integrate(h, 10_000)  # ~3.1416
"""

import logging
import numbers
from abc import ABC, abstractmethod
from typing import Callable, Optional

import numpy as np

from .proposals import Proposal, _make_rng

logger = logging.getLogger(__name__)


def _check_arguments(h: Callable, n: int) -> None:
    if not callable(h):
        raise TypeError(f"Integrand must be callable, got {type(h)}")
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValueError(f"Sample count must be an integer, got {type(n)}")
    if n < 1:
        raise ValueError(f"Sample count must be positive, got {n}")


class Integrator(ABC):
    """Common interface of the Monte Carlo strategies.

    ``integrate(h, n)`` returns an unbiased estimate of the integral of
    ``h`` over the sampling domain, using ``n`` independent draws. The only
    side effect is advancing the strategy's random engine.
    """

    name: str = "integrator"

    @abstractmethod
    def integrate(self, h: Callable[[float], float], n: int) -> float:
        """Estimate the integral of h from n samples."""


class CrudeMonteCarlo(Integrator):
    """Plain Monte Carlo: average h over uniform draws on [0, 1).

    The sampling density is 1 on [0, 1), so no reweighting is needed and
    the estimate is simply the sample mean of h. Error shrinks as
    O(1/sqrt(n)). Non-finite values of h are passed through unmodified.

    The integrator owns its random engine. Without ``rng`` or ``seed`` it
    is seeded once from OS entropy.
    """

    name = "Crude"

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        self._rng = _make_rng(rng, seed)

    def integrate(self, h: Callable[[float], float], n: int) -> float:
        _check_arguments(h, n)

        total = np.float64(0.0)
        with np.errstate(invalid="ignore", over="ignore"):
            for _ in range(n):
                u = self._rng.random()
                total += h(u)
            estimate = float(total / n)

        logger.debug("%s: n=%d estimate=%r", self.name, n, estimate)
        return estimate


class ImportanceSampler(Integrator):
    """Importance sampling with a caller-supplied proposal g.

    Draws x from the proposal and averages h(x) / g(x). When h is
    concentrated in part of the domain, a proposal that follows h spends
    fewer draws where h is near zero, and the 1/g(x) weight removes the
    bias this introduces.

    The sampler neither chooses nor validates the proposal. The density
    must be positive wherever the proposal can draw a point; a zero density
    yields an infinite or NaN term that propagates into the estimate.

    Args:
        proposal: ``Proposal`` (or any object with ``pdf(x)`` and
            ``sample()``) providing g_pdf and g_generator.
    """

    name = "Importance"

    def __init__(self, proposal: Proposal):
        has_pdf = callable(getattr(proposal, "pdf", None))
        has_sample = callable(getattr(proposal, "sample", None))
        if not (has_pdf and has_sample):
            raise TypeError(
                f"proposal must provide pdf(x) and sample(), got {type(proposal)}"
            )
        self.proposal = proposal

    @classmethod
    def from_functions(
        cls,
        g_pdf: Callable[[float], float],
        g_generator: Callable[[], float],
    ) -> "ImportanceSampler":
        """Build a sampler from a bare density and zero-argument generator."""
        return cls(Proposal(g_pdf, g_generator))

    def integrate(self, h: Callable[[float], float], n: int) -> float:
        _check_arguments(h, n)

        total = np.float64(0.0)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            for _ in range(n):
                x = self.proposal.sample()
                total += (np.float64(h(x)) / np.float64(self.proposal.pdf(x))) / n
            estimate = float(total)

        logger.debug(
            "%s (%s): n=%d estimate=%r",
            self.name,
            getattr(self.proposal, "name", "custom"),
            n,
            estimate,
        )
        return estimate
