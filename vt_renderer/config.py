"""Engine constants.

:class:`RenderConfig` bundles the few sizes and colours the renderer has to
make up because the pool does not define them (the terminal decides how big
a soft key is, how thick a button border looks, ...).
"""

from dataclasses import dataclass
from typing import Tuple

from vt_renderer.types import RGBA

DEFAULT_BUTTON_BORDER_WIDTH = 4
DEFAULT_KEY_SIZE = (100, 100)
DEFAULT_DIAGNOSTIC_COLOR: RGBA = (255, 0, 0, 255)
DEFAULT_SURFACE_SIZE = (480, 480)


@dataclass(frozen=True)
class RenderConfig:
    """Renderer settings.

    Attributes:
        button_border_width: Inset of a button face from its outline, in pixels.
        key_size: Width and height of the region a soft key is drawn in.
        diagnostic_color: Text colour of missing-reference labels.
    """

    button_border_width: int = DEFAULT_BUTTON_BORDER_WIDTH
    key_size: Tuple[int, int] = DEFAULT_KEY_SIZE
    diagnostic_color: RGBA = DEFAULT_DIAGNOSTIC_COLOR

    def __post_init__(self) -> None:
        if self.button_border_width < 0:
            raise ValueError(
                f"button_border_width must be >= 0, got {self.button_border_width}"
            )
        if min(self.key_size) < 0:
            raise ValueError(f"key_size must not be negative, got {self.key_size}")


DEFAULT_CONFIG = RenderConfig()
