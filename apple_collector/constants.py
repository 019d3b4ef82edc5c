"""
Window settings, colors, tuning knobs for movement, spawning and the mouth
animation, and file paths for the best-score record and the event log.
"""

import os

TITLE = "Pacman - Apple Collector 🍏"
WIDTH, HEIGHT = 900, 650
FPS = 60
BG_COLOR = (0, 0, 0)
PACMAN_COLOR = (253, 249, 0)
MOUTH_COLOR = (0, 0, 0)
APPLE_COLOR = (230, 41, 55)
LEAF_COLOR = (0, 228, 48)
TEXT_COLOR = (253, 249, 0)
BEST_TEXT_COLOR = (200, 200, 200)
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 18
FONT_SIZE_SCORE = 30

# HUD layout
SCORE_POS = (20, 40)                # baseline-ish position of "Score: N"
BEST_LINE_GAP = 8

# Player
PLAYER_RADIUS = 20
PLAYER_START = (400.0, 300.0)
PLAYER_SPEED = 4.0                  # units per frame, not scaled by dt

# Mouth animation
MOUTH_OPEN_S = 0.3
MOUTH_ANGLE_DEG = 45.0
MOUTH_UPPER_EDGE = 1.7              # edge length as a multiple of radius
MOUTH_LOWER_EDGE = 1.3

# Apples
APPLE_RADIUS = 10
LEAF_RADIUS = 4
LEAF_OFFSET_Y = 10
SPAWN_MARGIN = 30
TARGET_APPLES = 2
SPAWN_COOLDOWN_S = 0.8

# File settings
PROJECT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
BEST_SCORE_FILE = os.path.join(PROJECT_DIR, "best_score.json")
LOG_FILE = os.path.join(PROJECT_DIR, "log.md")
