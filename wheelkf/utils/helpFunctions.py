import numpy as np
import logging

log = logging.getLogger(__name__)


def positiveModulo(x, mod):
    # Remainder in [0, mod) also for negative x, e.g. for heading wraparound
    return ((x % mod) + mod) % mod


def isSymmetric(P, tol=1e-9):
    P = np.asarray(P)
    return P.ndim == 2 and P.shape[0] == P.shape[1] and bool(np.all(np.abs(P - P.T) < tol))


def isPositiveSemiDefinite(P, tol=1e-9):
    P = np.asarray(P)
    if not isSymmetric(P, tol):
        return False
    eigenvalues = np.linalg.eigvalsh(0.5 * (P + P.T))
    return bool(eigenvalues.min() >= -tol)


def rootMeanSquareError(estimates, truths):
    estimates = np.asarray(estimates, dtype=np.float64)
    truths = np.asarray(truths, dtype=np.float64)
    assert estimates.shape == truths.shape, str(estimates.shape) + str(truths.shape)
    if estimates.size == 0:
        raise ValueError("Can not calculate RMSE of empty sequences")
    return float(np.sqrt(np.mean(np.power(estimates - truths, 2))))


def printEstimateList(simList, estimateList):
    for index, (simState, estimate) in enumerate(zip(simList, estimateList)):
        print("\tStep ", index, ":\t", simState,
              " \tEstimate: ({0:9.3f}, {1:8.3f})".format(estimate.x[0, 0], estimate.x[1, 0]),
              sep='')
