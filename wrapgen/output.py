"""Writing generated wrapper modules to disk."""

from pathlib import Path
from typing import Iterable, List

from .codegen.core.generator import GenerationResult
from .codegen.core.templates import render_index
from .logging_config import get_logger

logger = get_logger(__name__)


class OutputError(Exception):
    """Raised when generated files cannot be written."""

    pass


def write_results(
    results: Iterable[GenerationResult],
    output_dir: str | Path,
    index_file: str | None = "index.ts",
    dry_run: bool = False,
) -> List[Path]:
    """Write each successful result to its own module plus an index barrel.

    Args:
        results: Generation results (failed ones are skipped).
        output_dir: Directory receiving the modules.
        index_file: Name of the barrel module, or None to skip it.
        dry_run: Compute the paths without touching the file system.

    Returns:
        Paths of every file written (or that would be written).

    Raises:
        OutputError: If a file cannot be written.
    """
    output_dir = Path(output_dir)
    written = []
    module_names = []

    files = []
    for result in results:
        if not result.success:
            logger.warning(
                "Not writing <%s>: %s", result.component.tag_name, result.error_message
            )
            continue

        module_name = result.metadata["module_name"]
        file_name = module_name + result.metadata["file_extension"]
        if module_name not in module_names:
            module_names.append(module_name)
        files.append((output_dir / file_name, result.code))

    if index_file:
        files.append((output_dir / index_file, render_index(module_names)))

    if not dry_run:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"Cannot create output directory {output_dir}: {e}") from e

    for path, content in files:
        if not dry_run:
            try:
                path.write_text(content, encoding="utf-8")
            except OSError as e:
                raise OutputError(f"Failed to write {path}: {e}") from e
            logger.info("Wrote %s", path)
        written.append(path)

    return written
