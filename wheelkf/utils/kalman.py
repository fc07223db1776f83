"""
A module with operations useful for Kalman filtering.

The filter is a set of pure functions; the caller owns the (x, P) pair and
threads it through propagateKalmanFilter once per time step.
"""
import numpy as np
import logging
from . import matrix
from ..models import wheel

log = logging.getLogger(__name__)


def kalmanPredictStep(prev_x, prev_P, F, B, u, Q):
    # x = Fx + Bu
    # P = FPF^T + Q
    new_x = matrix.sum(matrix.multiply(F, prev_x), matrix.multiply(B, u))
    new_P = matrix.sum(matrix.multiply(matrix.multiply(F, prev_P), matrix.transpose(F)), Q)
    return new_x, new_P


def innovation(z, x_bar, P_bar, H, R):
    y_tilde = matrix.subtract(z, matrix.multiply(H, x_bar))
    S = matrix.sum(matrix.multiply(matrix.multiply(H, P_bar), matrix.transpose(H)), R)
    return y_tilde, S


def normalizedInnovationSquared(z, x_bar, P_bar, H, R):
    y_tilde, S = innovation(z, x_bar, P_bar, H, R)
    nis = matrix.multiply(matrix.multiply(matrix.transpose(y_tilde), matrix.inverse(S)), y_tilde)
    return float(nis[0, 0])


def kalmanGain(P, H, R):
    """
    K = PH^T(HPH^T + R)^-1

    Raises SingularMatrixError if the innovation covariance can not be inverted
    """
    numerator = matrix.multiply(P, matrix.transpose(H))
    S = matrix.sum(matrix.multiply(matrix.multiply(H, P), matrix.transpose(H)), R)
    return matrix.multiply(numerator, matrix.inverse(S))


def kalmanUpdateStep(prev_x, prev_P, H, z, R):
    # x = x + K(z - Hx)
    # P = (I - KH)P(I - KH)^T + KRK^T
    K = kalmanGain(prev_P, H, R)
    new_x = matrix.sum(prev_x, matrix.multiply(K, matrix.subtract(z, matrix.multiply(H, prev_x))))
    # Joseph form, keeps P symmetric and positive semi-definite under rounding
    KH = matrix.multiply(K, H)
    ImKH = matrix.subtract(matrix.identity(KH.shape[1]), KH)
    new_P1 = matrix.multiply(matrix.multiply(ImKH, prev_P), matrix.transpose(ImKH))
    new_P2 = matrix.multiply(matrix.multiply(K, R), matrix.transpose(K))
    new_P = matrix.sum(new_P1, new_P2)
    return new_x, new_P


def propagateKalmanFilter(x_est, P_est, dt, throttle, wheelRadius, maxAngularAcceleration, z=None):
    """
    Advance the estimate one time step. Always predicts, and corrects with z
    when a measurement is given.

    Returns the new (x_est, P_est)
    """
    if dt <= 0:
        raise ValueError("dt must be positive, got " + str(dt))
    F = wheel.Phi(dt)
    B = wheel.B(dt, wheelRadius, maxAngularAcceleration)
    u = wheel.u(throttle)
    Q = wheel.Q()
    R = wheel.R()
    H = wheel.H

    x_est, P_est = kalmanPredictStep(x_est, P_est, F, B, u, Q)

    if z is None:
        log.debug("Predict only, dt={0:.3f}".format(dt))
        return x_est, P_est

    if np.ndim(z) == 0:
        z = [[z]]
    z = matrix.sum(z)
    if log.isEnabledFor(logging.DEBUG):
        log.debug("Update with z={0:.3f}, NIS={1:.3f}".format(
            z[0, 0], normalizedInnovationSquared(z, x_est, P_est, H, R)))
    x_est, P_est = kalmanUpdateStep(x_est, P_est, H, z, R)
    return x_est, P_est
