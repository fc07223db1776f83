import numpy as np
import wheelkf
import wheelkf.utils.simulator as sim
import wheelkf.utils.helpFunctions as hpf
from wheelkf.models import wheel

seed = 5447
x_0 = np.array([[0.], [0.]])
timeStep = 0.1
simTime = 1.0


def test_default_initialisation():
    tracker = wheelkf.Tracker()
    np.testing.assert_array_equal(tracker.x_est, wheel.x0)
    np.testing.assert_array_equal(tracker.P_est, wheel.P0)
    assert len(tracker.history) == 1


def test_prediction_follows_noise_free_truth():
    simList = sim.simulateTrajectory(x_0, 0.1, timeStep, simTime, noise=sim.ZeroNoise())
    measurementList = sim.simulateMeasurements(simList, 100., noise=sim.ZeroNoise())
    assert measurementList.nAvailable() == 0
    tracker = wheelkf.Tracker(x_0)
    tracker.addMeasurementList(measurementList)
    assert len(tracker.history) == len(simList)
    np.testing.assert_allclose(tracker.positionEstimates(), simList.positions())
    np.testing.assert_allclose(tracker.velocityEstimates(), simList.velocities())


def test_measurements_reduce_uncertainty():
    noise = sim.NoiseSource(seed)
    simList = sim.simulateTrajectory(x_0, lambda t: np.cos(t), timeStep, 10., noise=noise)
    measurementList = sim.simulateMeasurements(simList, 0.5, noise=noise)
    tracker = wheelkf.Tracker(x_0)
    tracker.addMeasurementList(measurementList)
    assert tracker.nUpdates == measurementList.nAvailable()
    for measurement, estimate in zip(measurementList, tracker.history[1:]):
        if measurement.available():
            assert estimate.P[0, 0] < wheel.R()[0, 0]
    for estimate in tracker.history:
        assert hpf.isSymmetric(estimate.P)
        assert hpf.isPositiveSemiDefinite(estimate.P)
    positionRMSE, velocityRMSE, errorString = tracker.getErrorString(simList)
    assert np.isfinite(positionRMSE) and np.isfinite(velocityRMSE)
    assert 'RMSE' in errorString
    tracker.printErrorSummary(simList)
