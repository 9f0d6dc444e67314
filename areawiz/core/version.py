"""AreaWiz - version constants.

Keep this module tiny and dependency-free. It is imported by many places
(core, geom, UI) and must not have side effects.
"""

APP_NAME = "AreaWiz"
APP_SHORT = "AW"

APP_VERSION = "0.1.0"

# Cantidad fija de partículas por figura.
# NOTE: todas las PointSet tienen exactamente este largo.
PARTICLE_COUNT = 120

# Duraciones (ms) del morph: régimen normal vs intro.
DEFAULT_MORPH_MS = 800
DEFAULT_INTRO_MORPH_MS = 500
# Tiempo que cada paso de la intro queda en pantalla antes del siguiente.
DEFAULT_INTRO_STEP_MS = 560
# Medio ciclo del "flotado" (0 -> 1); luego vuelve (1 -> 0).
DEFAULT_FLOAT_PERIOD_MS = 3000
DEFAULT_FRAME_MS = 16
