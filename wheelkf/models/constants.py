import numpy as np

defaultType = np.float64

nDimState = 2       # position, velocity
nDimControl = 1     # throttle
nObsDim = 1         # position

# Vehicle
wheelRadius = 50.
maxVelocity = 400.
maxAngularAcceleration = 10.

# Filter tuning
sigmaQ_tracker = 20.    # Process noise variance (per state)
sigmaR_tracker = 10.    # Measurement noise variance
p0 = 100.               # Initial state variance

# Reference model, uniform noise on [-noiseAmplitude_true, noiseAmplitude_true)
noiseAmplitude_true = 0.05
