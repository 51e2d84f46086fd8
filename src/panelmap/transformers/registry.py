"""Transformer registry.

Maps transform kinds (from config or the command line) to the classes that
build them, so a pipeline can be described declaratively:

::

    {"transforms": [{"kind": "u_arrangement", "parallel": 1},
                    {"kind": "rotate", "angle": 180}]}
                                  ↓
    build_pipeline(config.transforms)
                                  ↓
    LinkedTransformer([UArrangementTransformer(1), RotateTransformer(180)])

To add a new geometry, register a factory taking the TransformSpec:
``register_transformer(TransformKind.X, lambda spec: XTransformer(...))``.
"""

import logging
from collections.abc import Callable, Iterable

from pydantic import ValidationError

from panelmap.exceptions import ConfigValidationError
from panelmap.models import TransformKind, TransformSpec
from panelmap.surfaces.protocols import Transformer

from .linked import LinkedTransformer
from .presets import LargeSquare64x64Transformer
from .rotate import RotateTransformer
from .snake import Snake8x2Transformer
from .u_arrangement import UArrangementTransformer

logger = logging.getLogger(__name__)

TransformerFactory = Callable[[TransformSpec], Transformer]

TRANSFORMERS: dict[TransformKind, TransformerFactory] = {}


def register_transformer(kind: TransformKind, factory: TransformerFactory) -> None:
    """
    Register the factory used to build stages of the given kind.

    Args:
        kind: Transform kind (matches "kind" in config)
        factory: Callable building a stage from its TransformSpec
    """
    TRANSFORMERS[kind] = factory


def get_factory(kind: TransformKind) -> TransformerFactory | None:
    """Get the factory for a kind, or None if nothing is registered."""
    return TRANSFORMERS.get(kind)


def build_transformer(spec: TransformSpec) -> Transformer:
    """
    Build one transform stage.

    Raises:
        ConfigValidationError: If no factory is registered for the kind
        GeometryError: If the stage rejects its parameters
    """
    factory = get_factory(spec.kind)
    if factory is None:
        raise ConfigValidationError(
            field="kind", value=spec.kind, error_msg=f"no transformer registered for {spec.kind}"
        )
    return factory(spec)


def build_pipeline(specs: Iterable[TransformSpec]) -> LinkedTransformer:
    """Build a pipeline with one stage per spec, in order."""
    specs = list(specs)
    pipeline = LinkedTransformer(build_transformer(spec) for spec in specs)
    logger.info(f"Built pipeline: {' -> '.join(s.describe() for s in specs) or '(identity)'}")
    return pipeline


def parse_transform(text: str) -> TransformSpec:
    """
    Parse a command-line transform such as 'rotate:90' or 'u_arrangement:2'.

    The part after the colon is the angle for rotate and the parallel chain
    count for u_arrangement. Other kinds take no parameter.

    Raises:
        ConfigValidationError: If the text does not describe a valid stage
    """
    name, sep, param = text.strip().partition(":")
    name = name.strip().lower().replace("-", "_")

    try:
        kind = TransformKind(name)
    except ValueError:
        valid = ", ".join(k.value for k in TransformKind)
        raise ConfigValidationError(
            field="kind", value=text, error_msg=f"unknown transform '{name}' (valid: {valid})"
        ) from None

    param = param.strip()
    if sep and not param:
        raise ConfigValidationError(
            field="kind", value=text, error_msg=f"missing value after ':' in '{text.strip()}'"
        )

    fields: dict = {"kind": kind}
    if param:
        if kind == TransformKind.ROTATE:
            fields["angle"] = param
        elif kind == TransformKind.U_ARRANGEMENT:
            fields["parallel"] = param
        else:
            raise ConfigValidationError(
                field="kind", value=text, error_msg=f"'{kind.value}' takes no parameter"
            )

    try:
        return TransformSpec.model_validate(fields)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first.get("loc", ("transform",)))
        raise ConfigValidationError(field=field, value=text, error_msg=first.get("msg", str(e))) from e


def _register_builtin_transformers() -> None:
    """Register built-in transformers. Called on module import."""
    register_transformer(TransformKind.ROTATE, lambda spec: RotateTransformer(spec.angle))
    register_transformer(
        TransformKind.U_ARRANGEMENT, lambda spec: UArrangementTransformer(spec.parallel)
    )
    register_transformer(
        TransformKind.LARGE_SQUARE_64X64, lambda spec: LargeSquare64x64Transformer()
    )
    register_transformer(TransformKind.SNAKE_8X2, lambda spec: Snake8x2Transformer())


_register_builtin_transformers()

__all__ = [
    "TRANSFORMERS",
    "build_pipeline",
    "build_transformer",
    "get_factory",
    "parse_transform",
    "register_transformer",
]
