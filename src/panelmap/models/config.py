"""Panel matrix configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, computed_field, field_validator

from panelmap.utils.persistence import ConfigFile

from .enums import TransformKind

DEFAULT_CONFIG_PATH = Path.home() / ".panelmap" / "config.json"


class TransformSpec(BaseModel):
    """One stage of the remapping pipeline."""

    kind: TransformKind = Field(description="Geometry family of this stage")
    angle: int = Field(default=0, description="Rotation angle (rotate only)")
    parallel: int = Field(
        default=1, ge=1, description="Parallel chains stacked vertically (u_arrangement only)"
    )

    @field_validator("angle")
    @classmethod
    def validate_angle(cls, v: int) -> int:
        """Ensure the angle is a multiple of 90."""
        if v % 90 != 0:
            raise ValueError("angle must be a multiple of 90")
        return v

    def describe(self) -> str:
        """Short human-readable form, e.g. 'rotate:90'."""
        if self.kind == TransformKind.ROTATE:
            return f"{self.kind.value}:{self.angle}"
        if self.kind == TransformKind.U_ARRANGEMENT:
            return f"{self.kind.value}:{self.parallel}"
        return self.kind.value


class MatrixConfig(BaseModel):
    """Physical panel matrix layout and the transforms applied on top of it."""

    rows: int = Field(default=32, ge=1, description="Rows per panel")
    cols: int = Field(default=32, ge=1, description="Columns per panel")
    chain_length: int = Field(default=1, ge=1, description="Panels daisy-chained per chain")
    parallel: int = Field(default=1, ge=1, description="Chains driven in parallel")

    transforms: list[TransformSpec] = Field(
        default_factory=list,
        description="Transform stages, innermost first",
    )

    @computed_field
    @property
    def width(self) -> int:
        """Width of the physical surface in pixels."""
        return self.cols * self.chain_length

    @computed_field
    @property
    def height(self) -> int:
        """Height of the physical surface in pixels."""
        return self.rows * self.parallel

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "MatrixConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.panelmap/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH
        return ConfigFile(path, cls).load_or_default()

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH
        ConfigFile(path, type(self)).save(self)
