"""
Rendering configuration for expression trees.

A single module-level default is used whenever a caller does not pass an
explicit RenderConfig.
"""

from dataclasses import dataclass
from typing import Optional

DIVISION_SYMBOLS = ('/', '*')


@dataclass(frozen=True)
class RenderConfig:
    """Controls how expression trees are rendered as text"""
    constant_format: str = 'g'    # format spec applied to constant values
    division_symbol: str = '/'    # '*' reproduces the old division rendering

    def __post_init__(self):
        """Validate fields after initialization"""
        if not isinstance(self.constant_format, str):
            raise TypeError("constant_format must be a string")
        try:
            format(1.5, self.constant_format)
        except ValueError as e:
            raise ValueError(f"Invalid constant_format '{self.constant_format}': {e}") from e
        if self.division_symbol not in DIVISION_SYMBOLS:
            raise ValueError(f"division_symbol must be one of {DIVISION_SYMBOLS}, got '{self.division_symbol}'")


_default_render_config: Optional[RenderConfig] = None


def get_render_config() -> RenderConfig:
    """Get or create the default render configuration"""
    global _default_render_config
    if _default_render_config is None:
        _default_render_config = RenderConfig()
    return _default_render_config


def set_render_config(config: Optional[RenderConfig]):
    """Replace the default render configuration; None restores the defaults"""
    global _default_render_config
    if config is not None and not isinstance(config, RenderConfig):
        raise TypeError("config must be a RenderConfig or None")
    _default_render_config = config
