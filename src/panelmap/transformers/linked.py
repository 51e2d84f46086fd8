"""Composition of transform stages."""

import logging
from collections.abc import Iterable, Iterator
from typing import Union

from panelmap.exceptions import NullSurfaceError
from panelmap.surfaces.protocols import Surface, Transformer

logger = logging.getLogger(__name__)


class LinkedTransformer:
    """
    Ordered pipeline of transform stages.

    bind() feeds the innermost surface to the first stage, that stage's
    result to the second, and so on; drawing on the returned surface flows
    back through every stage. Order is up to the caller and is not checked:
    stacking stages whose geometry assumptions clash is allowed.

    The pipeline only references its stages. release_all() is the explicit
    teardown that releases every stage and empties the pipeline.

    Example:
        ```python
        pipeline = LinkedTransformer([UArrangementTransformer(1), RotateTransformer(180)])
        canvas = pipeline.bind(panel)
        ```
    """

    def __init__(self, transformers: Iterable[Transformer] = ()):
        self._transformers: list[Transformer] = list(transformers)

    @property
    def transformers(self) -> tuple[Transformer, ...]:
        """Stages in application order (innermost first)."""
        return tuple(self._transformers)

    def __len__(self) -> int:
        return len(self._transformers)

    def __iter__(self) -> Iterator[Transformer]:
        return iter(self._transformers)

    def add_transformer(self, transformer: Union[Transformer, Iterable[Transformer]]) -> None:
        """Append one stage, or several in order."""
        if hasattr(transformer, "bind"):
            self._transformers.append(transformer)
        else:
            self._transformers.extend(transformer)

    def set_transformers(self, transformers: Iterable[Transformer]) -> None:
        """Replace the whole sequence."""
        self._transformers = list(transformers)

    def bind(self, surface: Surface) -> Surface:
        """
        Bind every stage in order and return the outermost surface.

        An empty pipeline returns the surface it was given.

        Raises:
            NullSurfaceError: If surface is None
        """
        if surface is None:
            raise NullSurfaceError(type(self).__name__)

        for transformer in self._transformers:
            surface = transformer.bind(surface)

        logger.debug(
            f"Bound {len(self._transformers)} stage(s), "
            f"outer surface {surface.width()}x{surface.height()}"
        )
        return surface

    def release(self) -> None:
        """Release the bindings of every stage, keeping the sequence."""
        for transformer in self._transformers:
            transformer.release()

    def release_all(self) -> None:
        """Release every stage and empty the pipeline."""
        self.release()
        self._transformers.clear()
