"""Descriptor loader for reading YAML content files from the content root."""

import logging
from pathlib import Path
from typing import Any, Callable, TypeVar, Union

import yaml

from ..utils.errors import DescriptorDecodeError, DescriptorNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DescriptorLoader:
    """Reads and decodes descriptor files relative to a content root.

    Errors are never recovered here: a missing file raises
    DescriptorNotFoundError and malformed content raises DescriptorDecodeError.
    """

    def __init__(self, content_root: Union[str, Path]):
        self.content_root = Path(content_root).resolve()

    def resolve_path(self, relative_path: str) -> Path:
        """Join a relative path onto the content root.

        Args:
            relative_path: Path relative to the content root

        Returns:
            Absolute path inside the content root

        Raises:
            DescriptorNotFoundError: If the path escapes the content root
        """
        path = (self.content_root / relative_path).resolve()
        if not path.is_relative_to(self.content_root):
            raise DescriptorNotFoundError(relative_path, "outside content root")
        return path

    def load(self, relative_path: str, decode: Callable[[Any], T]) -> T:
        """Load a descriptor and decode it into the caller's shape.

        Args:
            relative_path: Path relative to the content root
            decode: Builds the typed record from the parsed YAML document

        Returns:
            Whatever decode returns

        Raises:
            DescriptorNotFoundError: If the file is missing or unreadable
            DescriptorDecodeError: If the YAML or its shape is malformed
        """
        logger.info(f"Loading course file {relative_path}")
        path = self.resolve_path(relative_path)

        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            raise DescriptorNotFoundError(relative_path) from None
        except OSError as e:
            raise DescriptorNotFoundError(relative_path, e.strerror or str(e)) from e

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise DescriptorDecodeError(relative_path, str(e)) from e

        try:
            return decode(data)
        except (ValueError, TypeError, KeyError) as e:
            raise DescriptorDecodeError(relative_path, str(e)) from e
