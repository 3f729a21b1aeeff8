from enum import Enum

COORD_DELIMITER = "NODE_COORD_SECTION"
EOF_MARKER = "EOF"

DEFAULT_SEED = 0
DEFAULT_RANDOM_COUNT = 1000
DEFAULT_LOW = 0.0
DEFAULT_HIGH = 1000.0
MIN_PARALLEL_POINTS = 4096


class Turn(int, Enum):
    CW = -1
    COLLINEAR = 0
    CCW = 1


class EdgeWeightType(str, Enum):
    EUC_2D = "EUC_2D"
    GEOM = "GEOM"
