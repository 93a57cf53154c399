# Opaque sample colors, packed 0xAARRGGBB
BLACK = 0xFF000000
WHITE = 0xFFFFFFFF
RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
YELLOW = 0xFFFFFF00
MAGENTA = 0xFFFF00FF
CYAN = 0xFF00FFFF
ORANGE = 0xFFFF8000
PURPLE = 0xFF800080
GRAY = 0xFF808080

TRANSPARENT = 0x00000000
HALF_TRANSPARENT_RED = 0x80FF0000

PRIMARIES = (RED, GREEN, BLUE)
RAINBOW = (RED, ORANGE, YELLOW, GREEN, CYAN, BLUE, MAGENTA)
