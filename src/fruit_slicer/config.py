# src/fruit_slicer/config.py
# =========================
# Global game configuration
# =========================

from dataclasses import dataclass

# -------- Screen --------
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_NAME = "Fruit Slicer"
FRAME_DELAY_MS = 16          # ~60 fps pacing via cv2.waitKey

# -------- Objects --------
OBJECT_SIZE = 120            # hit circle radius is OBJECT_SIZE // 4
PEAK_FACTOR = 40             # peak_height = SCREEN_HEIGHT - speed * PEAK_FACTOR
FRAGMENT_HORIZONTAL_RATE = 3

# -------- Spawn --------
SPAWN_INTERVAL = 40          # frames
BOMB_CHANCE = 1.0 / 3.0

# -------- Session --------
INITIAL_HEALTH = 5
FRUIT_SCORE = 10

# -------- Slice gates --------
MIN_SWIPE_LENGTH = 1.0
MIN_SWIPE_MOVEMENT_SQ = 25.0

# -------- Shake --------
SHAKE_INTENSITY = 10         # px
SHAKE_DURATION = 10          # frames

# -------- Trail --------
TRAIL_LENGTH = 10

# -------- Assets --------
BACKGROUND_ENV = "FRUIT_SLICER_BACKGROUND"
BACKGROUND_PATH = "assets/background.png"


@dataclass
class GameConfig:
    """
    Simulation tunables. Defaults come from the module constants so a test
    can override a single value without touching the rest.
    """
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    object_size: int = OBJECT_SIZE
    peak_factor: float = PEAK_FACTOR
    fragment_horizontal_rate: float = FRAGMENT_HORIZONTAL_RATE
    spawn_interval: int = SPAWN_INTERVAL
    bomb_chance: float = BOMB_CHANCE
    initial_health: int = INITIAL_HEALTH
    fruit_score: int = FRUIT_SCORE
    shake_intensity: int = SHAKE_INTENSITY
    shake_duration: int = SHAKE_DURATION

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError("screen size must be positive")
        if self.object_size <= 0 or self.object_size > self.screen_width:
            raise ValueError(f"object_size must be in (0, {self.screen_width}], got {self.object_size}")
        if self.peak_factor <= 0:
            raise ValueError("peak_factor must be positive")
        if self.spawn_interval <= 0:
            raise ValueError("spawn_interval must be positive")
        if self.initial_health <= 0:
            raise ValueError("initial_health must be positive")
        if not 0.0 <= self.bomb_chance <= 1.0:
            raise ValueError(f"bomb_chance must be in [0, 1], got {self.bomb_chance}")

    @property
    def radius(self) -> int:
        return self.object_size // 4
