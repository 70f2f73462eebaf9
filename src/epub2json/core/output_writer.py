"""Write conversion artifacts to the output directory."""

import shutil
from pathlib import Path

from pydantic import BaseModel

from epub2json.errors import PolicyError


class OutputWriter:
    """Write artifacts under a single output root."""

    def __init__(self, output_dir: Path):
        """Initialize output writer.

        Args:
            output_dir: Root directory for every written file. Created
                lazily on the first write.
        """
        self.output_dir = output_dir
        self.written: list[str] = []

    def clear(self) -> None:
        """Remove the output directory and everything in it."""
        if self.output_dir.exists():
            shutil.rmtree(self.output_dir)

    def resolve(self, relative_path: str) -> Path:
        """Absolute target for a relative artifact path.

        Raises:
            PolicyError: If the path escapes the output directory
        """
        root = self.output_dir.resolve()
        target = (root / relative_path).resolve()
        if target != root and root not in target.parents:
            raise PolicyError(f"Refusing to write outside output directory: {relative_path}")
        return target

    def write_bytes(self, relative_path: str, data: bytes) -> Path:
        """Write raw bytes, creating parent directories as needed."""
        filepath = self.resolve(relative_path)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_bytes(data)
        self.written.append(relative_path)
        return filepath

    def write_text(self, relative_path: str, text: str) -> Path:
        return self.write_bytes(relative_path, text.encode("utf-8"))

    def write_model(self, relative_path: str, model: BaseModel, **dump_options) -> Path:
        """Write a pydantic model as indented JSON."""
        return self.write_text(
            relative_path, model.model_dump_json(indent=2, **dump_options)
        )
