# Round pacing
STARTING_TIME_SEC = 30.0           # clock at round start
HIT_BONUS_SEC = 1.0                # added to the clock per hit
MISS_PENALTY_SEC = 2.0             # taken off the clock per non-bomb miss
SCORE_PER_LEVEL = 10               # difficulty level = score // SCORE_PER_LEVEL

# Slots
SLOT_COUNT = 9
GRID_COLUMNS = 3

# Mole timing
REVEAL_DURATION_SEC = 0.5          # hidden -> shown (and back) animation time
RESOLVE_DELAY_SEC = 0.25           # how long a hit mole stays up before snapping down

# Difficulty curve
BOMB_RATE_PER_LEVEL = 0.025
BOMB_RATE_MAX = 0.25               # reached at level 10
REINFORCED_RATE_PER_LEVEL = 0.025
REINFORCED_RATE_MAX = 1.0          # every non-bomb is reinforced from level 40
EXPOSURE_MIN_BASE_SEC = 1.0
EXPOSURE_MAX_BASE_SEC = 2.0
EXPOSURE_DECAY_PER_LEVEL = 0.1
EXPOSURE_FLOOR_SEC = 0.01          # no cap on insanity beyond this

# UX
EDGE_MARGIN = 24                   # keep the grid off the edges
HUD_HEIGHT = 64
SLOT_GAP = 18
HUD_COLOR = (230, 230, 230)
HOLE_COLOR = (40, 32, 28)
STANDARD_COLOR = (150, 105, 70)
REINFORCED_COLOR = (230, 190, 40)
CRACKED_COLOR = (170, 140, 60)
BOMB_COLOR = (60, 60, 60)
BOMB_FUSE_COLOR = (255, 120, 40)
HIT_COLOR = (240, 90, 90)
BANNER_COLOR = (255, 220, 80)
START_BUTTON_COLOR = (70, 180, 110)
START_BUTTON_SIZE = (260, 72)
