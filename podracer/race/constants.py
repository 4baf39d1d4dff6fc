"""Physics and protocol constants of the referee."""

DRAG_COEFF = 0.85
CHECKPOINT_RADIUS = 550
BOOST_THRUST = 650
MAX_THRUST = 100
MAX_TURN_DEGREES = 18
INITIAL_BOOST_COUNT = 1

# Distance of the aim point written for the referee.
AIM_DISTANCE = 4000

# Telemetry heading value meaning "unknown" (first turn only).
UNKNOWN_ANGLE = -1

PODS_PER_PLAYER = 2

SHIELD_TOKEN = "SHIELD"
BOOST_TOKEN = "BOOST"
