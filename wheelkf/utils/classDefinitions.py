import numpy as np
import collections
import logging
from ..models.constants import defaultType

log = logging.getLogger(__name__)

Estimate = collections.namedtuple('Estimate', ['x', 'P'])


class SimState:

    def __init__(self, state, time, **kwargs):
        self.state = np.array(state, dtype=defaultType, ndmin=2)
        assert self.state.shape == (2, 1), str(self.state.shape)
        self.time = time
        self.throttle = kwargs.get('throttle', 0.)

    def __eq__(self, other):
        if not np.array_equal(self.state, other.state):
            return False
        if self.time != other.time:
            return False
        if self.throttle != other.throttle:
            return False
        return True

    def __repr__(self):
        return ("Time: {0:.2f} \tPosition: {1:9.3f} \tVelocity: {2:8.3f} \tThrottle: {3:5.2f}".format(
            self.time, self.position(), self.velocity(), self.throttle))

    def position(self):
        return self.state[0, 0]

    def velocity(self):
        return self.state[1, 0]


class SimList(list):

    def __init__(self, *args):
        list.__init__(self, *args)

    def times(self):
        return np.array([s.time for s in self], dtype=defaultType)

    def positions(self):
        return np.array([s.position() for s in self], dtype=defaultType)

    def velocities(self):
        return np.array([s.velocity() for s in self], dtype=defaultType)


class Measurement:

    def __init__(self, time, z=None, **kwargs):
        self.time = time
        self.z = None if z is None else np.array(z, dtype=defaultType, ndmin=2)
        self.dt = kwargs.get('dt')
        self.throttle = kwargs.get('throttle', 0.)

    def __eq__(self, other):
        if self.time != other.time:
            return False
        if self.dt != other.dt or self.throttle != other.throttle:
            return False
        if (self.z is None) != (other.z is None):
            return False
        return self.z is None or np.array_equal(self.z, other.z)

    def __repr__(self):
        zStr = "None" if self.z is None else '{:.3f}'.format(self.z[0, 0])
        return "Time: {0:.2f} \tz: {1:}".format(self.time, zStr)

    def available(self):
        return self.z is not None


class MeasurementList(list):

    def __init__(self, *args):
        list.__init__(self, *args)

    def nAvailable(self):
        return len([m for m in self if m.available()])
