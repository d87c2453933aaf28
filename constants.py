"""
Shared configuration for the minimap HUD and touch controls.

This module defines constants used throughout the project, such as chunk
dimensions, colours, marker lifetimes and joystick geometry.  Keeping these
values in one place makes it easy to tweak the look and feel of the HUD
without touching the projection code.
"""

import settings

# Default window used by the demo entry point
WINDOW_WIDTH = 960
WINDOW_HEIGHT = 640

# Frames per second (controls update speed)
FPS = 60

# World storage
# Side length in tiles of a square world chunk.  Chunks are the unit of world
# storage; a chunk missing from the store has simply not been generated yet.
CHUNK_SIZE = 16

# Minimap geometry.  ``MINIMAP_RADIUS`` tiles are shown in each direction of
# the player so the map always covers a ``2 * radius`` square of tiles.
MINIMAP_SIZE = settings.MINIMAP_SIZE
MINIMAP_RADIUS = settings.MINIMAP_RADIUS
# Distance in pixels between the minimap border and clamped marker centres
EDGE_MARGIN = 8

# Death markers vanish five minutes after the player died
DEATH_MARKER_DURATION_MS = 5 * 60 * 1000

# Virtual joystick geometry (pixels).  The stick may travel until its edge
# touches the edge of the base, see ``VirtualJoystick.max_distance``.
JOYSTICK_SIZE = settings.JOYSTICK_SIZE
JOYSTICK_STICK_SIZE = settings.JOYSTICK_STICK_SIZE

# Half-width in degrees of the band each direction occupies around its axis.
# 67.5 leaves 45 degree overlaps where two directions are active at once.
DIRECTION_BAND_HALF_WIDTH = 67.5

# Player movement speed in tiles per second for the demo
PLAYER_SPEED = 6.0
SPRINT_MULTIPLIER = 1.8

# Colours (RGB)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
DARK_GREY = (60, 60, 60)

# Minimap clear colour, also used for unknown tile types
MINIMAP_BACKGROUND = (26, 26, 26)  # #1a1a1a

# Overlay colours replacing the base tile colour
TREE_COLOUR = (22, 101, 52)  # #166534
STONE_COLOUR = (87, 83, 78)  # #57534e

# Marker colours
SPAWN_COLOUR = (34, 197, 94)  # #22c55e
SPAWN_OUTLINE = (22, 101, 52)  # #166534
DEATH_COLOUR = (239, 68, 68)  # #ef4444
DEATH_OUTLINE = (153, 27, 27)  # #991b1b
PLAYER_COLOUR = WHITE
PLAYER_OUTLINE = BLACK

# Virtual joystick colours (RGBA)
JOYSTICK_BASE_COLOUR = (0, 0, 0, 77)
JOYSTICK_RIM_COLOUR = (255, 255, 255, 51)
JOYSTICK_STICK_COLOUR = (255, 255, 255, 128)

# Mobile control buttons
SPRINT_BUTTON_SIZE = 64
INVENTORY_BUTTON_SIZE = 56
SPRINT_COLOUR = (217, 119, 6)  # amber
SPRINT_RIM = (251, 191, 36)
INVENTORY_COLOUR = (68, 64, 60)  # stone
INVENTORY_RIM = (120, 113, 108)
