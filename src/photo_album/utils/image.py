"""Image file checks used when importing photos."""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from PIL import Image, UnidentifiedImageError

from ..core.logger import get_logger

logger = get_logger(__name__)


class ImageProcessor:
    """Decides which files can be imported as photos."""

    SUPPORTED_FORMATS = {'.jpg', '.jpeg', '.png', '.gif', '.bmp'}

    def __init__(self, extensions: Optional[Iterable[str]] = None):
        if extensions is not None:
            self.supported_formats = {ext.lower() for ext in extensions}
        else:
            self.supported_formats = set(self.SUPPORTED_FORMATS)

    def is_supported_image(self, file_path: Union[str, Path]) -> bool:
        """Check if file has a supported image extension."""
        path = Path(file_path)
        return path.suffix.lower() in self.supported_formats

    def validate_image(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """Validate image file and return detailed status."""
        path = Path(file_path)
        validation = {
            'is_valid': False,
            'exists': path.exists(),
            'is_file': path.is_file() if path.exists() else False,
            'is_supported_format': False,
            'is_readable': False,
            'errors': [],
        }

        if not validation['exists']:
            validation['errors'].append('File does not exist')
            return validation

        if not validation['is_file']:
            validation['errors'].append('Path is not a file')
            return validation

        validation['is_supported_format'] = self.is_supported_image(path)
        if not validation['is_supported_format']:
            validation['errors'].append(f'Unsupported format: {path.suffix}')
            return validation

        try:
            with Image.open(path) as img:
                img.verify()
                validation['is_readable'] = True
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
            validation['errors'].append(f'Cannot read image: {e}')

        validation['is_valid'] = validation['is_readable'] and not validation['errors']

        return validation
