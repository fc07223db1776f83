"""
A small driver holding the filter estimate between time steps.
"""
import numpy as np
import logging
from termcolor import cprint
from .utils import kalman
from .utils import helpFunctions as hpf
from .utils.classDefinitions import Estimate
from .models import wheel
from .models.constants import *

log = logging.getLogger(__name__)


class Tracker():

    def __init__(self, x_0=None, P_0=None, **kwargs):
        self.x_est = np.array(wheel.x0 if x_0 is None else x_0, dtype=defaultType, ndmin=2)
        self.P_est = np.array(wheel.P0 if P_0 is None else P_0, dtype=defaultType, ndmin=2)
        assert self.x_est.shape == (nDimState, 1), str(self.x_est.shape)
        assert self.P_est.shape == (nDimState, nDimState), str(self.P_est.shape)
        self.wheelRadius = kwargs.get('wheelRadius', wheelRadius)
        self.maxAngularAcceleration = kwargs.get('maxAngularAcceleration', maxAngularAcceleration)
        self.time = kwargs.get('time', 0.)
        self.nUpdates = 0
        self.history = [Estimate(self.x_est, self.P_est)]

    def __repr__(self):
        np.set_printoptions(precision=4, suppress=True)
        return ("Time: {0:.2f} \tState: {1:} \tCovariance diag: {2:}".format(
            self.time, self.x_est.flatten(), np.diag(self.P_est)))

    def addMeasurement(self, dt, throttle, z=None):
        self.x_est, self.P_est = kalman.propagateKalmanFilter(self.x_est, self.P_est, dt, throttle,
                                                              self.wheelRadius,
                                                              self.maxAngularAcceleration,
                                                              z)
        self.time += dt
        if z is not None:
            self.nUpdates += 1
        estimate = Estimate(self.x_est, self.P_est)
        self.history.append(estimate)
        log.debug(str(self))
        return estimate

    def addMeasurementList(self, measurementList):
        for measurement in measurementList:
            self.addMeasurement(measurement.dt, measurement.throttle, measurement.z)
        log.info("Processed {0:} steps, {1:} with measurement".format(len(measurementList), self.nUpdates))
        return self.history

    def positionEstimates(self):
        return np.array([e.x[0, 0] for e in self.history], dtype=defaultType)

    def velocityEstimates(self):
        return np.array([e.x[1, 0] for e in self.history], dtype=defaultType)

    def getErrorString(self, simList):
        assert len(simList) == len(self.history), str(len(simList)) + " != " + str(len(self.history))
        positionRMSE = hpf.rootMeanSquareError(self.positionEstimates(), simList.positions())
        velocityRMSE = hpf.rootMeanSquareError(self.velocityEstimates(), simList.velocities())
        return positionRMSE, velocityRMSE, ('RMSE position {0:7.3f} '.format(positionRMSE) +
                                            'velocity {0:7.3f} '.format(velocityRMSE) +
                                            'Updates {0:4d}/{1:4d}'.format(self.nUpdates,
                                                                            len(self.history) - 1))

    def printErrorSummary(self, simList, **kwargs):
        positionRMSE, _, errorString = self.getErrorString(simList)
        # Measurement noise standard deviation as reference
        reference = np.sqrt(wheel.R()[0, 0])
        on_color = 'on_green'
        on_color = 'on_yellow' if positionRMSE > reference else on_color
        on_color = 'on_red' if positionRMSE > 3 * reference else on_color
        on_color = kwargs.get('on_color', on_color)
        cprint(errorString, on_color=on_color, attrs=['bold'])
