"""
Constant velocity model for a wheeled vehicle driven by a throttle.

State is [position; velocity], the control is a unitless throttle scaled by
the wheel radius and the maximum angular acceleration of the wheel.
"""
import numpy as np
from .constants import *

H = np.array([[1.0, 0]], dtype=defaultType)  # Observes position only

x0 = np.zeros((nDimState, 1), dtype=defaultType)
P0 = np.array(np.diag([p0, p0]), dtype=defaultType)


def Phi(T):
    return np.array([[1.0, T],
                     [0, 1.0]],
                    dtype=defaultType)


def B(T, wheelRadius=wheelRadius, maxAngularAcceleration=maxAngularAcceleration):
    # Maximum linear acceleration at the rim, integrated over one period
    a = wheelRadius * maxAngularAcceleration
    return np.array([[a * T**2 * 0.5],
                     [a * T]],
                    dtype=defaultType)


def Q(sigmaQ=sigmaQ_tracker):
    return np.array(np.eye(nDimState) * sigmaQ, dtype=defaultType)


def R(sigmaR=sigmaR_tracker):
    return np.array(np.eye(nObsDim) * sigmaR, dtype=defaultType)


def u(throttle):
    return np.array([[throttle]], dtype=defaultType)


if __name__ == '__main__':
    print("Phi(1)\n", Phi(1))
    print("B(1)\n", B(1))
    print("H\n", H)
    print("P0\n", P0)
    print("Q\n", Q())
    print("R\n", R())
    print("Phi(1) P0 Phi(1)^T + Q\n", Phi(1).dot(P0).dot(Phi(1).T) + Q())
