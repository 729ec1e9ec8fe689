# Tunables shared by the core and the Qt front end

# Grid
PITCH = 5

# Sprites are authored at twice their on-canvas size
SPRITE_SCALE = 0.5
GATE_SPRITE = 110
GATE_SIZE = GATE_SPRITE * SPRITE_SCALE

# Freshly spawned gates wait here until the pointer moves them
STAGING_POS = (10000.0, 10000.0)

# Wire pixels (r, g, b, a)
WIRE_COLOR = (0.4, 0.5, 0.4, 1.0)

# Camera
MIN_ZOOM = 0.5
MAX_ZOOM = 4.0
DEFAULT_ZOOM = 2.0
NEAR = -1000.0
FAR = 1000.0

# Update loop
TICK_MS = 16

# Window
TITLE = "gatos"
CLEAR_COLOR = (0.25, 0.3, 0.25)

# Static file server
SERVE_ADDR = ("127.0.0.1", 1337)
