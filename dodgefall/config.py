"""
Dodgefall - Configuration loader.

Values can be overridden through environment variables or a ``.env``
file placed next to this module. Timing values are per frame; the
defaults assume the loop runs at FPS frames per second.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from dodgefall.models import Color

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_path(key: str, default: Path) -> Path:
    """Get filesystem path from environment."""
    return Path(os.getenv(key, str(default))).expanduser()


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 480)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 640)
FPS = _get_int('FPS', 60)
FULLSCREEN = _get_bool('FULLSCREEN', False)

# Avatar
AVATAR_SIZE = _get_float('AVATAR_SIZE', 40.0)
AVATAR_BOTTOM_MARGIN = _get_float('AVATAR_BOTTOM_MARGIN', 10.0)  # gap below avatar at rest

# Falling objects
OBJECT_SIZE = _get_float('OBJECT_SIZE', 20.0)
BASE_FALL_SPEED = _get_float('BASE_FALL_SPEED', 2.0)  # pixels/frame at multiplier 1.0
BASE_SPAWN_CHANCE = _get_float('BASE_SPAWN_CHANCE', 0.02)  # per frame at multiplier 1.0

# Round timing
ROUND_DURATION = _get_float('ROUND_DURATION', 30.0)
TIME_STEP = _get_float('TIME_STEP', 1.0 / 60.0)  # time units removed per frame
INITIAL_SPEED_MULTIPLIER = _get_float('INITIAL_SPEED_MULTIPLIER', 1.0)
SPEED_INCREMENT = _get_float('SPEED_INCREMENT', 0.005)  # added per active frame

# Notifications
NOTIFICATION_DURATION = _get_float('NOTIFICATION_DURATION', 2.0)  # seconds
LOSS_MESSAGE = os.getenv('LOSS_MESSAGE', 'Game Over!')
WIN_MESSAGE = os.getenv('WIN_MESSAGE', 'You Win!')

# Assets
ASSETS_DIR = Path(__file__).parent / 'assets'
AVATAR_IMAGE = _get_path('AVATAR_IMAGE', ASSETS_DIR / 'avatar.jpg')
OBJECT_IMAGE = _get_path('OBJECT_IMAGE', ASSETS_DIR / 'object.jpg')

# Visual
BACKGROUND_COLOR = Color(r=173, g=216, b=230).as_rgb_tuple  # light blue
AVATAR_FALLBACK_COLOR = Color(r=0, g=0, b=255).as_rgb_tuple
OBJECT_FALLBACK_COLOR = Color(r=255, g=0, b=0).as_rgb_tuple
HUD_TEXT_COLOR = Color(r=20, g=20, b=40).as_rgb_tuple
BANNER_BACKGROUND_COLOR = Color(r=0, g=0, b=0, a=170).as_tuple
BANNER_TEXT_COLOR = Color(r=255, g=255, b=255).as_rgb_tuple

# UI
FONT_SIZE_HUD = _get_int('FONT_SIZE_HUD', 36)
FONT_SIZE_BANNER = _get_int('FONT_SIZE_BANNER', 48)
HUD_MARGIN = 10
