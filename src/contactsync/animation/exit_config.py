"""Declarative configuration for exit (fade-out) animations."""

from dataclasses import dataclass
from typing import Optional, Tuple
import logging

from PyQt6.QtCore import QEasingCurve, QPropertyAnimation
from PyQt6.QtWidgets import QGraphicsOpacityEffect, QWidget

from contactsync.protocols import get_app_config

logger = logging.getLogger(__name__)


@dataclass
class ExitAnimationConfig:
    """Fade-out tuning knobs; duration defaults to the app config value."""

    duration_ms: Optional[int] = None
    start_opacity: float = 1.0
    end_opacity: float = 0.0
    easing: QEasingCurve.Type = QEasingCurve.Type.OutCubic

    def __post_init__(self):
        if self.duration_ms is None:
            self.duration_ms = get_app_config().exit_animation_ms
        if self.duration_ms < 0:
            logger.warning(f"[ExitAnimationConfig] Negative duration {self.duration_ms}ms, using 0")
            self.duration_ms = 0


def create_fade_out(
    widget: QWidget,
    config: Optional[ExitAnimationConfig] = None,
) -> Tuple[QGraphicsOpacityEffect, QPropertyAnimation]:
    """Install an opacity effect on widget and build its fade-out animation.

    Both objects are parented to widget. Restore the effect's opacity to
    config.start_opacity when the widget becomes visible again.
    """
    config = config or ExitAnimationConfig()
    effect = QGraphicsOpacityEffect(widget)
    effect.setOpacity(config.start_opacity)
    widget.setGraphicsEffect(effect)

    animation = QPropertyAnimation(effect, b"opacity", widget)
    animation.setDuration(config.duration_ms)
    animation.setStartValue(config.start_opacity)
    animation.setEndValue(config.end_opacity)
    animation.setEasingCurve(config.easing)
    return effect, animation
