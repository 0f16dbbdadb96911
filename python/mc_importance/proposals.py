"""Proposal distributions for importance sampling.

A proposal pairs a density ``pdf(x)`` with a zero-argument ``sample()`` that
draws points distributed according to that density. The sampler is usually
built by inverse-CDF transform of a uniform draw.
"""

import logging
import math
from typing import Callable, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


def _make_rng(
    rng: Optional[np.random.Generator] = None, seed: Optional[int] = None
) -> np.random.Generator:
    """Return the injected generator, or a new one seeded from ``seed``.

    With neither given, numpy seeds the generator from OS entropy.
    """
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both")
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def _compute_cdf_table(
    pdf: Callable,
    x_min: float,
    x_max: float,
    n_points: int = 2048,
) -> tuple:
    """Compute normalized CDF lookup table on support.

    Uses trapezoidal rule for numerical integration and enforces
    normalization to ensure CDF endpoint is exactly 1.0.

    Args:
        pdf: PDF function
        x_min, x_max: Support boundaries
        n_points: Number of grid points (minimum 1000)

    Returns:
        (x_grid, cdf_values): Normalized CDF lookup tables

    Raises:
        ValueError: If PDF integral is zero
    """
    n_points = max(n_points, 1000)

    x_grid = np.linspace(x_min, x_max, n_points)
    pdf_values = np.array([pdf(x) for x in x_grid], dtype=np.float64)

    pdf_values = np.nan_to_num(pdf_values, nan=0.0, posinf=0.0, neginf=0.0)
    pdf_values = np.clip(pdf_values, 0, None)

    dx = (x_max - x_min) / (n_points - 1)
    cdf_values = np.zeros(n_points)
    cdf_values[1:] = np.cumsum((pdf_values[:-1] + pdf_values[1:]) / 2) * dx

    total = cdf_values[-1]
    if total <= 0:
        raise ValueError(
            "PDF integral is zero. Please check the PDF function or support range."
        )
    return x_grid, cdf_values / total


class Proposal:
    """A proposal distribution g for importance sampling.

    Holds the density g_pdf and a generator producing draws distributed
    according to it. Nothing checks that the two agree, or that the density
    is positive wherever the generator can land: that is the caller's
    precondition.

    Examples:
        >>> # g(x) = 2(1 - x) on [0, 1), sampled by inverse CDF
        >>> proposal = Proposal.linear(seed=0)

        >>> # Any density with a closed-form inverse CDF
        >>> proposal = Proposal.from_inverse_cdf(
        ...     lambda x: 2 * x, lambda u: math.sqrt(u)
        ... )

        >>> # Numerical inverse CDF from a lookup table
        >>> proposal = Proposal.from_pdf(lambda x: 3 * x * x)
    """

    def __init__(
        self,
        density: Callable[[float], float],
        sampler: Callable[[], float],
        name: Optional[str] = None,
    ):
        if not callable(density):
            raise TypeError("density must be callable")
        if not callable(sampler):
            raise TypeError("sampler must be callable")
        self._density = density
        self._sampler = sampler
        self.name = name or "custom"

    def pdf(self, x: float) -> float:
        """Evaluate the proposal density at x."""
        return self._density(x)

    def sample(self) -> float:
        """Draw one point from the proposal."""
        return self._sampler()

    def __repr__(self):
        return f"Proposal(name={self.name!r})"

    @staticmethod
    def from_inverse_cdf(
        pdf: Callable[[float], float],
        inverse_cdf: Callable[[float], float],
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        name: Optional[str] = None,
    ) -> "Proposal":
        """Create a proposal sampled by inverse transform.

        Each draw applies ``inverse_cdf`` to a uniform variate in [0, 1).

        Args:
            pdf: Density of the proposal
            inverse_cdf: Inverse of the proposal's CDF
            rng: Optional generator owned by the proposal from now on
            seed: Seed for a fresh generator (mutually exclusive with rng)
            name: Label used in repr and logs

        Returns:
            Proposal drawing ``inverse_cdf(u)`` for ``u ~ U[0, 1)``
        """
        if not callable(inverse_cdf):
            raise TypeError("inverse_cdf must be callable")
        engine = _make_rng(rng, seed)

        def sampler() -> float:
            return inverse_cdf(engine.random())

        return Proposal(pdf, sampler, name=name or "inverse_cdf")

    @staticmethod
    def uniform(
        rng: Optional[np.random.Generator] = None, seed: Optional[int] = None
    ) -> "Proposal":
        """Uniform proposal on [0, 1). Importance sampling with it is crude MC."""

        def pdf(x: float) -> float:
            return 1.0 if 0.0 <= x < 1.0 else 0.0

        return Proposal.from_inverse_cdf(
            pdf, lambda u: u, rng=rng, seed=seed, name="uniform"
        )

    @staticmethod
    def linear(
        rng: Optional[np.random.Generator] = None, seed: Optional[int] = None
    ) -> "Proposal":
        """Linearly decreasing proposal g(x) = 2(1 - x) on [0, 1).

        The CDF is G(x) = 1 - (1 - x)^2, so G^-1(u) = 1 - sqrt(1 - u).
        """

        def pdf(x: float) -> float:
            return 2 * (1 - x)

        def inverse_cdf(u: float) -> float:
            return 1 - math.sqrt(1 - u)

        return Proposal.from_inverse_cdf(
            pdf, inverse_cdf, rng=rng, seed=seed, name="linear"
        )

    @staticmethod
    def from_pdf(
        pdf_func: Callable[[float], float],
        support: Tuple[float, float] = (0.0, 1.0),
        table_size: int = 2048,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> "Proposal":
        """Create a proposal from a density alone.

        Builds a CDF lookup table over ``support`` and samples by linear
        interpolation of its inverse. The pdf need not be normalized for
        sampling, but ``pdf()`` returns ``pdf_func`` as given, so it must be
        normalized for the importance weights to be unbiased.

        Args:
            pdf_func: PDF function accepting float, returning float
            support: (x_min, x_max) of the proposal
            table_size: Number of points in lookup table (minimum 1000)
            rng: Optional generator owned by the proposal from now on
            seed: Seed for a fresh generator (mutually exclusive with rng)

        Returns:
            Proposal configured for table-based sampling

        Raises:
            ValueError: If the support is empty or the PDF integrates to zero
        """
        if not callable(pdf_func):
            raise TypeError("pdf_func must be callable")
        if table_size < 2:
            raise ValueError("table_size must be at least 2")

        x_min, x_max = support
        if not x_max > x_min:
            raise ValueError(f"Support must satisfy x_min < x_max, got {support}")

        x_table, cdf_table = _compute_cdf_table(pdf_func, x_min, x_max, table_size)
        logger.debug(
            "Built CDF table with %d points on [%g, %g]", len(x_table), x_min, x_max
        )

        def inverse_cdf(u: float) -> float:
            return float(np.interp(u, cdf_table, x_table))

        return Proposal.from_inverse_cdf(
            pdf_func, inverse_cdf, rng=rng, seed=seed, name="table"
        )

    @staticmethod
    def beta(
        alpha: float,
        beta_param: float,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> "Proposal":
        """Create a Beta(alpha, beta_param) proposal on [0, 1].

        Beta(1, 2) has density 2(1 - x), the same as ``Proposal.linear``.

        Raises:
            ImportError: If scipy is not installed
        """
        try:
            from scipy.stats import beta as beta_dist
        except ImportError:
            raise ImportError(
                "scipy is required for Beta proposals. Install with: pip install scipy"
            )

        frozen = beta_dist(alpha, beta_param)

        def pdf(x: float) -> float:
            return float(frozen.pdf(x))

        def inverse_cdf(u: float) -> float:
            return float(frozen.ppf(u))

        return Proposal.from_inverse_cdf(
            pdf,
            inverse_cdf,
            rng=rng,
            seed=seed,
            name=f"beta({alpha:g}, {beta_param:g})",
        )
