from . import models
from . import utils
from .utils.matrix import MatrixError, ShapeError, DimensionError, SingularMatrixError
from .utils.kalman import kalmanPredictStep, kalmanGain, kalmanUpdateStep, propagateKalmanFilter
from .utils.simulator import trueStateModel, trueMeasurementModel, NoiseSource, ZeroNoise
from .utils.helpFunctions import positiveModulo
from .tracker import Tracker
