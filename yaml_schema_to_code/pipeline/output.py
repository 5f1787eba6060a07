"""
Output writer for rendered batches.

Layout: <output_dir>/<template>/<table>.<extension>
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..utils import sanitize_file_name
from .config import OutputConfig, OutputMode
from .errors import OutputWriteError
from .merger import AtomicWriter
from .renderer import RenderedBatch

logger = logging.getLogger(__name__)


class OutputWriter:
    """Writes generated files below an output directory."""

    def __init__(self, output_dir: str | Path, extension: str, config: OutputConfig | None = None):
        """
        Initialize the writer.

        Args:
            output_dir: Root directory of the generated files
            extension: Extension of generated files, without leading dot
            config: Output options, defaults to OutputConfig()
        """
        self.output_dir = Path(output_dir)
        self.extension = extension.lstrip(".")
        self.config = config or OutputConfig()
        self.writer = AtomicWriter()

    def path_for(self, template_id: str, table_name: str) -> Path:
        """Get the output path of a table rendered with a template."""
        file_name = f"{sanitize_file_name(table_name)}.{self.extension}"
        return self.output_dir / sanitize_file_name(template_id) / file_name

    def write_all(self, rendered: RenderedBatch) -> list[Path]:
        """
        Write every rendered file.

        Args:
            rendered: Output of TemplateRenderer.render_all

        Returns:
            Paths written, in write order

        Raises:
            OutputWriteError: If two tables map to the same file, a file exists
                in ERROR_IF_EXISTS mode or a write fails
        """
        # Check every target before writing so a collision leaves no partial output
        planned: dict[Path, tuple[str, str]] = {}
        for template_id, tables in rendered.items():
            for table_name, content in tables:
                path = self.path_for(template_id, table_name)
                if path in planned:
                    other_template, other_table = planned[path]
                    raise OutputWriteError(f"Tables '{other_table}' ({other_template}) and '{table_name}' ({template_id}) would both be written to {path}")
                planned[path] = (template_id, table_name)

        written = []
        for template_id, tables in rendered.items():
            for table_name, content in tables:
                path = self.path_for(template_id, table_name)
                self.write(path, content)
                written.append(path)
        logger.info("Wrote %d file(s) to %s", len(written), self.output_dir)
        return written

    def write(self, path: Path, content: str) -> None:
        try:
            if self.config.mode == OutputMode.ERROR_IF_EXISTS:
                self.writer.write_if_not_exists(path, content)
            elif self.config.atomic_write:
                self.writer.write(path, content)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(f"Failed to write {path}: {e}") from e
        logger.debug("Wrote %s", path)
