"""JSON config files backed by a pydantic model.

A ConfigFile pairs a path with the model stored in it. It is what
MatrixConfig and the `panelmap config` commands use to read, write and check
the matrix layout on disk.

Writes keep the previous file as `<name>.bak` and go through a temp file
that is renamed into place, so an interrupted `config init --force` never
leaves half a config behind. A file that exists but does not parse is
reported, never replaced by defaults.
"""

import logging
import shutil
from pathlib import Path
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from panelmap.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class ConfigFile(Generic[T]):
    """
    One JSON file holding one model.

    Example:
        ```python
        store = ConfigFile(Path("matrix.json"), MatrixConfig)
        config = store.load_or_default()
        store.save(config.model_copy(update={"chain_length": 4}))
        ```
    """

    def __init__(self, path: Path, model_type: type[T]):
        self.path = Path(path)
        self.model_type = model_type

    @property
    def backup_path(self) -> Path:
        return self.path.with_suffix(self.path.suffix + ".bak")

    @property
    def _temp_path(self) -> Path:
        return self.path.with_suffix(self.path.suffix + ".tmp")

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> T:
        """
        Read and validate the file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If it is empty, unreadable or not JSON
            ConfigValidationError: If a value fails validation
        """
        if not self.path.exists():
            raise FileNotFoundError(f"File not found: {self.path}")

        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigFileInvalidError(str(self.path), f"Cannot read file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(self.path), "File is empty")

        try:
            model = self.model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"Invalid {self.model_type.__name__} in {self.path}: {e}")
            raise wrap_pydantic_error(e, str(self.path)) from e

        logger.debug(f"Loaded {self.model_type.__name__} from {self.path}")
        return model

    def load_or_default(self) -> T:
        """Load the file, or return a default model if it doesn't exist (nothing is written)."""
        if not self.path.exists():
            logger.info(f"{self.path} not found, using default {self.model_type.__name__}")
            return self.model_type()
        return self.load()

    def save(self, model: T, backup: bool = True) -> None:
        """
        Write model to the file, creating parent directories.

        Raises:
            OSError: If the file cannot be written
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)

        if backup and self.path.exists():
            shutil.copy2(self.path, self.backup_path)
            logger.debug(f"Created backup: {self.backup_path}")

        temp_path = self._temp_path
        try:
            temp_path.write_text(model.model_dump_json(indent=2), encoding="utf-8")
            temp_path.replace(self.path)
        finally:
            if temp_path.exists():
                temp_path.unlink()
        logger.debug(f"Saved {type(model).__name__} to {self.path}")

    def check(self) -> Optional[str]:
        """Return None if the file loads cleanly, otherwise a message saying why not."""
        try:
            self.load()
        except FileNotFoundError:
            return f"File not found: {self.path}"
        except ConfigurationError as e:
            return e.user_message
        return None
