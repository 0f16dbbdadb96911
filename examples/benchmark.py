import math
import time

import numpy as np
from matplotlib import pyplot as plt

from mc_importance import CrudeMonteCarlo, ImportanceSampler, Proposal
from mc_importance.driver import target


SAMPLE_SIZES = [100, 500, 1000, 5000, 10000, 50000, 100000, 500000]
N_REPEATS = 20

crude_errors = []
importance_errors = []

for N_SAMPLES in SAMPLE_SIZES:
    print(f"\n{'=' * 60}")
    print(f"Testing with {N_SAMPLES:,} samples")
    print(f"{'=' * 60}")

    seeds = np.random.SeedSequence(N_SAMPLES).spawn(2 * N_REPEATS)

    start_crude = time.time()
    crude = [
        CrudeMonteCarlo(rng=np.random.default_rng(s)).integrate(target, N_SAMPLES)
        for s in seeds[:N_REPEATS]
    ]
    crude_time = time.time() - start_crude

    start_importance = time.time()
    importance = [
        ImportanceSampler(Proposal.linear(rng=np.random.default_rng(s))).integrate(
            target, N_SAMPLES
        )
        for s in seeds[N_REPEATS:]
    ]
    importance_time = time.time() - start_importance

    # Root mean squared error over the repeats
    crude_rmse = math.sqrt(np.mean((np.array(crude) - math.pi) ** 2))
    importance_rmse = math.sqrt(np.mean((np.array(importance) - math.pi) ** 2))
    crude_errors.append(crude_rmse)
    importance_errors.append(importance_rmse)

    print(f"Crude RMSE:      {crude_rmse:.6f}  ({crude_time:.3f} s)")
    print(f"Importance RMSE: {importance_rmse:.6f}  ({importance_time:.3f} s)")

reference = [crude_errors[0] * math.sqrt(SAMPLE_SIZES[0] / n) for n in SAMPLE_SIZES]

plt.figure(figsize=(8, 6), dpi=100, layout="constrained")
plt.loglog(SAMPLE_SIZES, crude_errors, "o-", label="Crude", linewidth=2, markersize=8)
plt.loglog(
    SAMPLE_SIZES,
    importance_errors,
    "s-",
    label="Importance, g(x) = 2(1 - x)",
    linewidth=2,
    markersize=8,
)
plt.loglog(SAMPLE_SIZES, reference, "k--", label="O(1/sqrt(n))", linewidth=1)

plt.xlabel("Number of Samples", fontsize=12)
plt.ylabel("RMSE against pi", fontsize=12)
plt.title("Monte Carlo Integration Error Comparison", fontsize=14)
plt.legend(fontsize=11)
plt.show()
