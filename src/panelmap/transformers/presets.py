"""Fixed pipelines kept so known installations keep their pixel mapping."""

from panelmap.surfaces.protocols import Surface

from .rotate import RotateTransformer
from .u_arrangement import UArrangementTransformer


class LargeSquare64x64Transformer:
    """
    Four 32x32 panels in one chain shown as a 64x64 square.

    Predates UArrangementTransformer; it is now a U-fold with one chain
    followed by a 180 degree turn, which reproduces the historical layout.
    """

    def __init__(self):
        self._arrange = UArrangementTransformer(1)
        self._rotated = RotateTransformer(180)

    def bind(self, surface: Surface) -> Surface:
        return self._rotated.bind(self._arrange.bind(surface))

    def release(self) -> None:
        self._rotated.release()
        self._arrange.release()
