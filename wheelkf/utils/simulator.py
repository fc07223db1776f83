"""
Reference model generating the true vehicle trajectory and noisy position
measurements for the filter to consume.
"""
import numpy as np
import logging
from . import matrix
from .classDefinitions import SimState, SimList, Measurement, MeasurementList
from ..models import wheel
from ..models.constants import *

log = logging.getLogger(__name__)


class NoiseSource:
    """
    Bounded uniform disturbances drawn from a seedable numpy generator
    """

    def __init__(self, seed=None):
        self.rng = np.random.default_rng(seed)

    def uniform(self, low=-noiseAmplitude_true, high=noiseAmplitude_true):
        return float(self.rng.uniform(low, high))


class ZeroNoise(NoiseSource):

    def __init__(self):
        self.rng = None

    def uniform(self, low=-noiseAmplitude_true, high=noiseAmplitude_true):
        return 0.


_noiseSource = NoiseSource()


def seed_simulator(seed):
    global _noiseSource
    _noiseSource = NoiseSource(seed)
    return _noiseSource


def _getNoiseSource(noise):
    return _noiseSource if noise is None else noise


def trueStateModel(prev_x, dt, throttle, wheelRadius=wheelRadius, maxVelocity=maxVelocity,
                   maxAngularAcceleration=maxAngularAcceleration, noise=None):
    if dt <= 0:
        raise ValueError("dt must be positive, got " + str(dt))
    noise = _getNoiseSource(noise)
    Fx = matrix.multiply(wheel.Phi(dt), prev_x)
    Bu = matrix.multiply(wheel.B(dt, wheelRadius, maxAngularAcceleration), wheel.u(throttle))
    w = np.array([[0.], [noise.uniform()]], dtype=defaultType)
    new_x = matrix.sum(Fx, Bu, w)
    if abs(new_x[1, 0]) > maxVelocity:
        log.debug("Velocity {0:.2f} saturated at {1:.1f}".format(new_x[1, 0], maxVelocity))
        new_x[1, 0] = np.clip(new_x[1, 0], -maxVelocity, maxVelocity)
    return new_x


def trueMeasurementModel(x, noise=None):
    noise = _getNoiseSource(noise)
    return matrix.sum(matrix.multiply(wheel.H, x), [[noise.uniform()]])


def simulateTrajectory(x_0, throttle, timeStep, simTime, **kwargs):
    """
    Run the true state model from x_0 for simTime seconds.

    throttle is either a constant or a function of time. Returns a SimList
    starting with x_0 at time 0.
    """
    throttleFunction = throttle if callable(throttle) else (lambda t: throttle)
    noise = kwargs.get('noise')
    modelKwargs = {key: kwargs[key] for key in ('wheelRadius', 'maxVelocity', 'maxAngularAcceleration')
                   if key in kwargs}
    nTimeSteps = int(np.ceil(simTime / timeStep - 1e-9))

    simList = SimList()
    simList.append(SimState(x_0, 0., throttle=throttleFunction(0.)))
    for i in range(nTimeSteps):
        previous = simList[-1]
        state = trueStateModel(previous.state, timeStep, previous.throttle, noise=noise, **modelKwargs)
        time = (i + 1) * timeStep
        simList.append(SimState(state, time, throttle=throttleFunction(time)))
    log.info("Simulated {0:} steps of {1:.3f}s".format(nTimeSteps, timeStep))
    return simList


def simulateMeasurements(simList, measurementPeriod, **kwargs):
    """
    One Measurement per simulated step after the first. The position is only
    measured when measurementPeriod has passed since the last measurement,
    other steps carry z = None.
    """
    if measurementPeriod <= 0:
        raise ValueError("measurementPeriod must be positive, got " + str(measurementPeriod))
    noise = kwargs.get('noise')
    measurementList = MeasurementList()
    lastMeasurement = simList[0].time if simList else None
    for previous, current in zip(simList[:-1], simList[1:]):
        dt = current.time - previous.time
        z = None
        if current.time - lastMeasurement >= measurementPeriod - 1e-9:
            z = trueMeasurementModel(current.state, noise=noise)
            lastMeasurement = current.time
        measurementList.append(Measurement(current.time, z, dt=dt, throttle=previous.throttle))
    log.debug("{0:} of {1:} steps measured".format(measurementList.nAvailable(), len(measurementList)))
    return measurementList
