"""
Configuration file for Space Invaders
======================================

All gameplay constants, difficulty scaling, audio, persistence and logging
options are centralized here. Modify these values to tune the game.

Usage:
    from invaders.config import Config
    cfg = Config()
    print(cfg.SCREEN_WIDTH)
"""

from dataclasses import dataclass
from typing import Tuple, Optional


@dataclass
class Config:
    """
    Central configuration for the entire project.

    Sections:
    1. Screen Settings - Play-field size and frame rate
    2. Player / Bullets - Ship geometry and projectile speeds
    3. Enemy Formation - Grid layout and randomized row/column counts
    4. Difficulty - Per-level speed and shooting scaling
    5. Scoring - Points and lives
    6. Persistence / Assets - High score file and sprite/sound directory
    7. Audio - Synthesized sound effects
    8. Logging - Log level and output
    9. Colors - Rendering palette
    """

    # =========================================================================
    # SCREEN SETTINGS
    # =========================================================================

    # Play-field dimensions. Wide enough that a 12-column grid
    # (11 * 70 + 50 + 40 = 860px) fits before its first edge bounce.
    SCREEN_WIDTH: int = 900
    SCREEN_HEIGHT: int = 700

    FPS: int = 60

    # =========================================================================
    # PLAYER / BULLETS
    # =========================================================================

    PLAYER_WIDTH: int = 50
    PLAYER_HEIGHT: int = 40
    PLAYER_SPEED: int = 5
    PLAYER_Y_OFFSET: int = 60  # Distance from the bottom edge to the ship's top

    BULLET_WIDTH: int = 3
    BULLET_HEIGHT: int = 10
    BULLET_SPEED: int = 7        # Player bullets move up
    ENEMY_BULLET_SPEED: int = 5  # Enemy bullets move down

    # =========================================================================
    # ENEMY FORMATION
    # =========================================================================

    ENEMY_WIDTH: int = 40
    ENEMY_HEIGHT: int = 35
    ENEMY_SPACING_X: int = 70
    ENEMY_SPACING_Y: int = 45
    ENEMY_OFFSET_LEFT: int = 50
    ENEMY_OFFSET_TOP: int = 50
    ENEMY_DROP: int = 25      # Vertical step when the formation bounces
    EDGE_MARGIN: int = 10     # Formation bounces this close to the field edge

    # rows = min(MAX_ROWS, BASE_ROWS + level // ROWS_LEVEL_STEP + randint(EXTRA_MIN, EXTRA_MAX))
    FORMATION_BASE_ROWS: int = 2
    FORMATION_ROWS_LEVEL_STEP: int = 3
    FORMATION_EXTRA_ROWS_MIN: int = 1
    FORMATION_EXTRA_ROWS_MAX: int = 3
    FORMATION_MAX_ROWS: int = 8
    FORMATION_MIN_COLS: int = 8
    FORMATION_MAX_COLS: int = 12

    # =========================================================================
    # DIFFICULTY
    # =========================================================================

    ENEMY_BASE_SPEED: float = 1.0
    ENEMY_SPEED_PER_LEVEL: float = 0.3

    # Per-tick chance that one enemy fires: BASE + level * PER_LEVEL
    ENEMY_SHOOT_BASE: float = 0.01
    ENEMY_SHOOT_PER_LEVEL: float = 0.005

    # =========================================================================
    # SCORING
    # =========================================================================

    SCORE_BASE_POINTS: int = 10  # Each kill is worth SCORE_BASE_POINTS + level
    LIVES: int = 3

    # =========================================================================
    # PERSISTENCE / ASSETS
    # =========================================================================

    HIGH_SCORE_FILE: str = 'data/high_score.json'
    HIGH_SCORE_KEY: str = 'spaceInvadersHighScore'

    # Optional player.png, enemy.png, gameover.mp3, levelup.mp3
    ASSET_DIR: str = 'assets'

    # =========================================================================
    # AUDIO
    # =========================================================================

    SOUND_ENABLED: bool = True
    SOUND_SAMPLE_RATE: int = 22050
    SOUND_VOLUME: float = 0.8

    # =========================================================================
    # LOGGING
    # =========================================================================

    LOG_DIR: str = 'logs'
    LOG_LEVEL: str = 'INFO'
    LOG_TO_FILE: bool = True

    # =========================================================================
    # SYSTEM
    # =========================================================================

    # Random seed for reproducibility (None for random)
    SEED: Optional[int] = None

    # Headless autopilot: fire once every N ticks
    AUTOPILOT_FIRE_INTERVAL: int = 12

    # =========================================================================
    # COLORS
    # =========================================================================

    COLOR_BACKGROUND: Tuple[int, int, int] = (0, 0, 0)
    COLOR_PLAYER: Tuple[int, int, int] = (0, 255, 0)
    COLOR_ENEMY: Tuple[int, int, int] = (255, 0, 0)
    COLOR_BULLET: Tuple[int, int, int] = (0, 255, 0)
    COLOR_ENEMY_BULLET: Tuple[int, int, int] = (255, 0, 0)
    COLOR_TEXT: Tuple[int, int, int] = (0, 255, 0)
    COLOR_GAME_OVER: Tuple[int, int, int] = (255, 0, 0)

    @property
    def PLAYER_START_X(self) -> float:
        """Centered horizontal start position of the ship."""
        return self.SCREEN_WIDTH / 2 - self.PLAYER_WIDTH / 2

    @property
    def PLAYER_Y(self) -> int:
        """Fixed vertical position of the ship."""
        return self.SCREEN_HEIGHT - self.PLAYER_Y_OFFSET

    def __post_init__(self):
        """Validation of gameplay invariants."""
        assert self.SCREEN_WIDTH > 0 and self.SCREEN_HEIGHT > 0, "Screen size must be positive"
        assert self.FPS > 0, "FPS must be positive"
        assert self.PLAYER_WIDTH < self.SCREEN_WIDTH, "Player must fit inside the field"
        assert self.PLAYER_SPEED > 0, "Player speed must be positive"
        assert self.BULLET_SPEED > 0 and self.ENEMY_BULLET_SPEED > 0, "Bullet speeds must be positive"
        assert 1 <= self.FORMATION_EXTRA_ROWS_MIN <= self.FORMATION_EXTRA_ROWS_MAX, \
            "Extra row range must be ordered and at least 1"
        assert 1 <= self.FORMATION_MIN_COLS <= self.FORMATION_MAX_COLS, \
            "Column range must be ordered and at least 1"
        assert self.FORMATION_MAX_ROWS >= 1, "Formation needs at least one row"
        assert self.FORMATION_ROWS_LEVEL_STEP > 0, "Row level step must be positive"
        assert self.ENEMY_BASE_SPEED > 0, "Enemy speed must be positive"
        assert 0 <= self.ENEMY_SHOOT_BASE <= 1, "Shoot chance must be a probability"
        assert self.ENEMY_SHOOT_PER_LEVEL >= 0, "Shoot scaling must be non-negative"
        assert self.LIVES >= 1, "Player needs at least one life"
        assert 0.0 <= self.SOUND_VOLUME <= 1.0, "Volume must be in [0, 1]"



if __name__ == "__main__":
    # Print configuration summary
    cfg = Config()
    print("=" * 60)
    print("Space Invaders - Configuration Summary")
    print("=" * 60)
    print(f"\n  Field: {cfg.SCREEN_WIDTH}x{cfg.SCREEN_HEIGHT} @ {cfg.FPS} FPS")
    print(f"  Player: {cfg.PLAYER_WIDTH}x{cfg.PLAYER_HEIGHT}, speed {cfg.PLAYER_SPEED}")
    print(f"  Columns: {cfg.FORMATION_MIN_COLS}-{cfg.FORMATION_MAX_COLS}, max rows {cfg.FORMATION_MAX_ROWS}")
    print(f"  Lives: {cfg.LIVES}")
    print(f"  High score file: {cfg.HIGH_SCORE_FILE}")
    print("=" * 60)
