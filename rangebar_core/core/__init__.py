from .animation import (
    AnimationHandle,
    Animator,
    FloatAnimation,
    FrameAnimator,
    Interpolator,
    UpdateListener,
    accelerate_decelerate,
    linear,
)
from .units import DisplayMetrics, UnitConverter

__all__ = [
    "AnimationHandle",
    "Animator",
    "DisplayMetrics",
    "FloatAnimation",
    "FrameAnimator",
    "Interpolator",
    "UnitConverter",
    "UpdateListener",
    "accelerate_decelerate",
    "linear",
]
