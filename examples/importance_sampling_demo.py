#!/usr/bin/env python3
"""Importance Sampling Example

Estimate the integral of h(x) = 3x^2 over [0, 1] (exact: 1.0) by sampling
from a proposal g(x) = 2x that follows the shape of h.
"""

import math
from mc_importance import ImportanceSampler, Proposal

# Proposal g(x) = 2x, CDF x^2, inverse CDF sqrt(u)
proposal = Proposal.from_inverse_cdf(lambda x: 2 * x, math.sqrt, seed=42)
sampler = ImportanceSampler(proposal)

estimate = sampler.integrate(lambda x: 3 * x * x, 100_000)
print(f"Analytic proposal: {estimate:.6f}  (expected: 1.0)")

# Same proposal, built numerically from the density alone
table_sampler = ImportanceSampler(Proposal.from_pdf(lambda x: 2 * x, seed=42))
estimate = table_sampler.integrate(lambda x: 3 * x * x, 100_000)
print(f"Table proposal:    {estimate:.6f}  (expected: 1.0)")

# Beta(3, 1) has density 3x^2, the integrand itself: every weight is 1
beta_sampler = ImportanceSampler(Proposal.beta(3.0, 1.0, seed=42))
estimate = beta_sampler.integrate(lambda x: 3 * x * x, 10_000)
print(f"Beta(3, 1):        {estimate:.6f}  (expected: 1.0)")
