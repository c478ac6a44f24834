"""
SVG file output for SimpleSVG

Writes rendered documents to disk.
"""

import logging
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.document import Document

logger = logging.getLogger(__name__)


def write_text(file_name: str, text: str, encoding: str = "utf-8") -> bool:
    """
    Write text to a file.

    The text is encoded before the file is opened, so an existing file
    is left untouched if the text cannot be encoded or the file cannot
    be opened.

    Args:
        file_name: Destination path
        text: Complete file content
        encoding: Text encoding

    Returns:
        True if successful, False otherwise
    """
    try:
        data = text.encode(encoding)
    except (UnicodeError, LookupError) as e:
        logger.error(f"Error encoding {file_name} as {encoding}: {e}")
        return False

    try:
        with open(file_name, 'wb') as f:
            f.write(data)
    except OSError as e:
        logger.error(f"Error writing {file_name}: {e}")
        return False

    logger.debug(f"Wrote {len(text)} characters to {file_name}")
    return True


def save_document(document: 'Document', file_name: Optional[str] = None,
                  encoding: str = "utf-8") -> bool:
    """
    Save a document as an SVG file.

    Args:
        document: The document to save
        file_name: Destination path (default: the document's own file name)
        encoding: Text encoding

    Returns:
        True if successful, False otherwise
    """
    return write_text(file_name or document.file_name, document.to_string(), encoding)
