import argparse
import logging
import math
import random
import time

import numpy as np
from scipy.stats import linregress

from square_percolation import Percolation, is_positive_int

logger = logging.getLogger(__name__)

# critical value of the standard normal for a 95% confidence interval
CONFIDENCE_95 = 1.96


class PercolationStats:
    """
    Monte Carlo estimate of the site percolation threshold on an n-by-n grid.

    Every trial starts from a fresh Percolation(n) and opens sites drawn
    uniformly from all n*n coordinates until the grid percolates. Drawing a
    site that is already open is a no-op, so the recorded fraction only
    counts distinct opens.

    :param n: grid size, positive integer.
    :param trials: number of independent trials, positive integer.
    :param rng: random.Random instance or an integer seed. A fresh
        unseeded generator is used when omitted.
    """

    def __init__(self, n: int, trials: int, rng=None):
        if not is_positive_int(n) or not is_positive_int(trials):
            raise ValueError("grid size n and trials count must be positive integers")

        self.gridSize = n
        self.trialCount = trials
        self.rng = rng if isinstance(rng, random.Random) else random.Random(rng)

        start = time.perf_counter()
        self.results = np.array([self._run_trial() for _ in range(self.trialCount)])
        self.elapsed = time.perf_counter() - start

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "n=%d trials=%d finished in %.3fs, mean=%.6f",
                self.gridSize, self.trialCount, self.elapsed, self.mean(),
            )

    def _run_trial(self) -> float:
        simulator = Percolation(self.gridSize)
        while not simulator.percolates():
            row = self.rng.randrange(self.gridSize)
            col = self.rng.randrange(self.gridSize)
            simulator.open_site(row, col)
        return simulator.open_fraction()

    def mean(self) -> float:
        return float(np.mean(self.results))

    def stddev(self) -> float:
        """Sample standard deviation; NaN for a single trial."""
        if self.trialCount < 2:
            return math.nan
        return float(np.std(self.results, ddof=1))

    def confidenceLow(self) -> float:
        return self.mean() - CONFIDENCE_95 * self.stddev() / math.sqrt(self.trialCount)

    def confidenceHigh(self) -> float:
        return self.mean() + CONFIDENCE_95 * self.stddev() / math.sqrt(self.trialCount)

    def confidence_interval(self):
        return self.confidenceLow(), self.confidenceHigh()

    def report(self):
        print(f"{'mean()':<16} = {self.mean():.6f}")
        print(f"{'stddev()':<16} = {self.stddev():.6f}")
        print(f"{'confidenceLow()':<16} = {self.confidenceLow():.6f}")
        print(f"{'confidenceHigh()':<16} = {self.confidenceHigh():.6f}")
        print(f"{'elapsed time':<16} = {self.elapsed:.6f}")


def sweep(sizes, trials: int, rng=None):
    """
    Run one PercolationStats per grid size, all drawing from the same
    random source. Returns the estimators in the order of `sizes`.
    """
    rng = rng if isinstance(rng, random.Random) else random.Random(rng)

    estimators = []
    for n_value in sizes:
        logger.info("simulate n = %d (%d trials)", n_value, trials)
        estimators.append(PercolationStats(int(n_value), trials, rng=rng))
    return estimators


def extrapolate_threshold(sizes, means, exponent=-3/4):
    """
    Finite-size scaling: fit mean p_c(L) linearly against L^exponent and
    read p_c(infinity) off the intercept.

    Returns a dict with keys 'pc_inf', 'slope' and 'R2'.
    """
    sizes = np.asarray(sizes, dtype=float)
    means = np.asarray(means, dtype=float)

    if sizes.shape != means.shape:
        raise ValueError("sizes and means must have the same length")
    if len(np.unique(sizes)) < 2:
        raise ValueError("at least two distinct grid sizes are needed to extrapolate")

    X_scaling = sizes ** exponent
    slope, intercept, r_value, p_value, std_err = linregress(X_scaling, means)

    return {"pc_inf": float(intercept), "slope": float(slope), "R2": float(r_value ** 2)}


def build_parser():
    parser = argparse.ArgumentParser(
        description="Estimate the site percolation threshold of an n-by-n grid by Monte Carlo simulation."
    )

    parser.add_argument('n', type=int, help="Size of the square grid (n x n).")
    parser.add_argument('trials', type=int, help="The number of Monte Carlo trials to perform.")

    parser.add_argument(
        '--Lmax',
        type=int,
        default=None,
        help="Sweep grid sizes from n up to Lmax and extrapolate p_c(infinity).",
    )
    parser.add_argument(
        '--Lstep',
        type=int,
        default=None,
        help="Step size for the sweep (defaults to n).",
    )
    parser.add_argument('--seed', type=int, default=None, help="Seed for the random source.")
    parser.add_argument(
        '--log-level',
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level.",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    if args.n <= 0 or args.trials <= 0:
        parser.error("grid size n and trials count must be positive integers")
    if args.Lstep is not None and args.Lmax is None:
        parser.error("--Lstep only applies to a sweep, give --Lmax as well")

    rng = random.Random(args.seed)

    if args.Lmax is None:
        stats = PercolationStats(args.n, args.trials, rng=rng)
        stats.report()
        return 0

    step = args.Lstep if args.Lstep is not None else args.n
    if step <= 0 or args.Lmax < args.n:
        parser.error("sweep needs Lstep > 0 and Lmax >= n")

    sizes = list(range(args.n, args.Lmax + 1, step))
    estimators = sweep(sizes, args.trials, rng=rng)

    print("=" * 60)
    for n_value, stats in zip(sizes, estimators):
        print(f"n = {n_value}")
        stats.report()
        print("-" * 60)

    if len(sizes) >= 2:
        fit = extrapolate_threshold(sizes, [s.mean() for s in estimators])
        print(f"pc(infinity) = {fit['pc_inf']:.6f}, R^2 = {fit['R2']:.4f}")
    else:
        logger.warning("only one grid size in the sweep, skipping extrapolation")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
