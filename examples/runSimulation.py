#!/usr/bin/env python3
import argparse
import logging
import numpy as np
import wheelkf
import wheelkf.utils.simulator as sim
import wheelkf.utils.helpFunctions as hpf
import wheelkf.models.wheel as model


def throttleProfile(period):
    # Square wave, full forward for one period then full reverse
    return lambda t: 1.0 if hpf.positiveModulo(t, 2 * period) < period else -1.0


def runSimulation(seed, simTime, timeStep, measurementPeriod, **kwargs):
    noise = sim.NoiseSource(seed)
    x_0 = np.array([[0.], [0.]])
    simList = sim.simulateTrajectory(x_0, throttleProfile(kwargs.get('throttlePeriod', 2.0)),
                                     timeStep, simTime, noise=noise)
    measurementList = sim.simulateMeasurements(simList, measurementPeriod, noise=noise)

    tracker = wheelkf.Tracker(x_0, model.P0)
    tracker.addMeasurementList(measurementList)

    if kwargs.get('verbose', False):
        hpf.printEstimateList(simList, tracker.history)
    tracker.printErrorSummary(simList)
    return tracker, simList


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Run wheeled vehicle Kalman filter simulation")
    parser.add_argument('-s', help="Random seed", type=int, default=1234)
    parser.add_argument('-T', help="Simulation time [s]", type=float, default=20.0)
    parser.add_argument('-d', help="Time step [s]", type=float, default=1. / 60)
    parser.add_argument('-m', help="Measurement period [s]", type=float, default=0.5)
    parser.add_argument('-v', help="Print every step", action='store_true')
    parser.add_argument('-D', help="Debug logging", action='store_true')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.D else logging.INFO,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')
    runSimulation(args.s, args.T, args.d, args.m, verbose=args.v)
    print("Done :)")
