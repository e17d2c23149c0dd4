"""File system utilities."""

import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from ..core.logger import get_logger

logger = get_logger(__name__)


class FileUtils:
    """File system operations and utilities."""

    @staticmethod
    def find_files(directory: Union[str, Path], pattern: str = "*",
                   recursive: bool = True, include_hidden: bool = False) -> List[Path]:
        """Find files matching pattern in directory."""
        dir_path = Path(directory)

        if not dir_path.exists():
            logger.debug(f"Directory does not exist: {dir_path}")
            return []

        try:
            if recursive:
                files = dir_path.rglob(pattern)
            else:
                files = dir_path.glob(pattern)

            result = []
            for file_path in files:
                if file_path.is_file():
                    if include_hidden or not file_path.name.startswith('.'):
                        result.append(file_path)

            return sorted(result)

        except OSError as e:
            logger.error(f"Failed to find files in {dir_path}: {e}")
            return []

    @staticmethod
    def ensure_directory(directory: Union[str, Path], mode: int = 0o755) -> bool:
        """Ensure directory exists with proper permissions."""
        dir_path = Path(directory)

        try:
            dir_path.mkdir(parents=True, exist_ok=True, mode=mode)
            return True
        except OSError as e:
            logger.error(f"Failed to create directory {dir_path}: {e}")
            return False

    @staticmethod
    def atomic_write(file_path: Union[str, Path], content: Union[str, bytes],
                     mode: str = 'w', encoding: str = 'utf-8') -> bool:
        """Atomically write content to file.

        The content goes to a temporary file beside the target which then
        replaces it, so readers never see a partial record.
        """
        path = Path(file_path)
        tmp_path: Optional[Path] = None

        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            with tempfile.NamedTemporaryFile(
                mode=mode,
                encoding=encoding if 'b' not in mode else None,
                dir=path.parent,
                prefix=f'.{path.name}.',
                suffix='.tmp',
                delete=False
            ) as tmp_file:
                tmp_path = Path(tmp_file.name)
                tmp_file.write(content)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())

            tmp_path.replace(path)
            logger.debug(f"Atomically wrote file: {path}")

            return True

        except OSError as e:
            logger.error(f"Failed to atomically write {path}: {e}")
            if tmp_path is not None:
                try:
                    tmp_path.unlink(missing_ok=True)
                except OSError as cleanup_error:
                    logger.warning(f"Failed to remove temporary file {tmp_path}: {cleanup_error}")
            return False

    @staticmethod
    def safe_delete(file_path: Union[str, Path]) -> bool:
        """Delete a file if present; returns False only when removal fails."""
        path = Path(file_path)

        try:
            path.unlink(missing_ok=True)
            logger.debug(f"Removed file: {path}")
            return True
        except OSError as e:
            logger.error(f"Failed to remove {path}: {e}")
            return False
