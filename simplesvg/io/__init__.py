"""
SimpleSVG I/O Module

Handles writing documents to files.
"""

from .svg_writer import write_text, save_document

__all__ = ['write_text', 'save_document']
