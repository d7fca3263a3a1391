"""Tilt on hover — pointer position over a card mapped to 3D rotation."""

from dataclasses import dataclass

from folio.config import TiltSettings


@dataclass(frozen=True)
class TiltPose:
    rotate_x: float = 0.0
    rotate_y: float = 0.0
    scale: float = 1.0

    def css_transform(self, perspective: int) -> str:
        return (
            f"perspective({perspective}px) rotateX({self.rotate_x:.2f}deg) "
            f"rotateY({self.rotate_y:.2f}deg) scale3d({self.scale}, {self.scale}, {self.scale})"
        )


REST = TiltPose()


def tilt_for_pointer(rel_x: float, rel_y: float, settings: TiltSettings) -> TiltPose:
    """Rotation for a pointer at (rel_x, rel_y), each 0..1 across the card.

    The card leans away from the pointer: pointer at the top edge gives
    ``+max_angle_x``, pointer at the right edge gives ``+max_angle_y``.
    Positions outside the card are clamped to its edge.
    """
    nx = min(1.0, max(-1.0, rel_x * 2 - 1))
    ny = min(1.0, max(-1.0, rel_y * 2 - 1))
    return TiltPose(
        rotate_x=-ny * settings.max_angle_x,
        rotate_y=nx * settings.max_angle_y,
        scale=settings.scale,
    )
