"""
linemark: line-oriented Markdown to XHTML

Splits a document into lines, classifies each line, and recursively
decomposes the line sequence into a tree of typed blocks (paragraphs,
headlines, rulers, code, block quotes, nested lists). Link reference
definitions anywhere in the document are collected while reading and
resolved at render time.

Quick Start:
    >>> from linemark import process
    >>> process("Title\\n=====\\n\\n* one\\n* two\\n")
    '<h1>Title</h1>\\n<ul>\\n<li>one</li>\\n<li>two</li>\\n</ul>\\n'

    >>> # Two steps: block tree, then HTML
    >>> from linemark import parse, render
    >>> doc = parse("> quoted\\nlazy line")
    >>> doc.children[0].type
    <BlockType.BLOCKQUOTE: 4>
    >>> render(doc)
    '<blockquote><p>quoted\\nlazy line</p>\\n</blockquote>\\n'

    >>> # Files and byte streams (UTF-8 unless configured otherwise)
    >>> from linemark import process_file
    >>> html = process_file("README.txt", encoding="latin-1")  # doctest: +SKIP

Installation:
    pip install linemark
"""

from __future__ import annotations

import io
import os
from typing import BinaryIO, TextIO

from linemark.blocks import Block, BlockType, Document
from linemark.config import (
    DEFAULT_ENCODING,
    ProcessConfig,
    get_process_config,
    process_config_context,
    reset_process_config,
    set_process_config,
)
from linemark.errors import LinemarkError, RenderError, SourceReadError
from linemark.lexer import Lexer, LineType
from linemark.lexer.classifiers import classify
from linemark.lines import Line
from linemark.parser import Parser
from linemark.references import LinkRef, LinkRefTable
from linemark.renderers.html import HtmlRenderer
from linemark.renderers.protocol import ASTRenderer
from linemark.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def parse(source: str | TextIO, *, source_file: str | None = None) -> Document:
    """Parse a source into a block tree.

    Args:
        source: Decoded text, or a text stream read to its end
        source_file: Optional source file path recorded on the Document

    Returns:
        Document whose ``root`` is the ROOT block

    Example:
        >>> doc = parse("# Hello")
        >>> doc.children[0].depth
        1
    """
    return Parser(source, source_file=source_file).parse()


def render(doc: Document) -> str:
    """Render a parsed Document to HTML."""
    return HtmlRenderer().render(doc)


def process(text: str) -> str:
    """Convert Markdown text to HTML.

    Example:
        >>> process("Hello *World*")
        '<p>Hello <em>World</em></p>\\n'
    """
    return render(parse(text))


def process_reader(reader: TextIO, *, source_file: str | None = None) -> str:
    """Convert an already-decoded text stream to HTML.

    Raises:
        SourceReadError: if reading from ``reader`` fails
    """
    source = source_file or getattr(reader, "name", None)
    try:
        doc = parse(reader, source_file=source_file)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(str(exc), source=source) from exc
    return render(doc)


def process_file(path: str | os.PathLike[str], encoding: str | None = None) -> str:
    """Convert a Markdown file to HTML.

    Args:
        path: File to read
        encoding: Text encoding (defaults to the configured encoding, "UTF-8")

    Raises:
        SourceReadError: if the file cannot be opened, the encoding is
            unknown, or its bytes are invalid for the encoding
    """
    config = get_process_config()
    encoding = encoding or config.encoding
    source = os.fspath(path)
    logger.debug("reading %s as %s", source, encoding)
    try:
        with open(source, encoding=encoding, errors=config.errors, newline="") as reader:
            doc = parse(reader, source_file=source)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise SourceReadError(str(exc), source=source) from exc
    return render(doc)


def process_stream(stream: BinaryIO, encoding: str | None = None) -> str:
    """Convert a binary stream of Markdown to HTML.

    The stream is read to its end but not closed.

    Args:
        stream: Readable binary stream
        encoding: Text encoding (defaults to the configured encoding, "UTF-8")

    Raises:
        SourceReadError: if the encoding is unknown, reading fails, or the
            bytes are invalid for the encoding
    """
    config = get_process_config()
    encoding = encoding or config.encoding
    name = getattr(stream, "name", None)
    source = name if isinstance(name, str) else None
    reader: io.TextIOWrapper | None = None
    try:
        reader = io.TextIOWrapper(stream, encoding=encoding, errors=config.errors, newline="")
        doc = parse(reader, source_file=source)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise SourceReadError(str(exc), source=source) from exc
    finally:
        # Hand the stream back open
        if reader is not None:
            reader.detach()
    return render(doc)


class Markdown:
    """Markdown processor bound to one configuration.

    Usage:
        >>> md = Markdown()
        >>> md("1. first\\n2. second")
        '<ol>\\n<li>first</li>\\n<li>second</li>\\n</ol>\\n'

        >>> legacy = Markdown(encoding="latin-1")
        >>> html = legacy.convert_file("old.txt")  # doctest: +SKIP

    Thread Safety:
        The configuration is applied through a ContextVar for the duration
        of each call, so one instance may be used from several threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, encoding: str = DEFAULT_ENCODING, errors: str = "strict") -> None:
        """Initialize processor.

        Args:
            encoding: Text encoding for files and byte streams
            errors: Codec error handler ("strict" turns bad bytes into errors)
        """
        self._config = ProcessConfig(encoding=encoding, errors=errors)

    @property
    def config(self) -> ProcessConfig:
        return self._config

    def __call__(self, source: str) -> str:
        return process(source)

    def parse(self, source: str | TextIO) -> Document:
        return parse(source)

    def render(self, doc: Document) -> str:
        return render(doc)

    def convert_file(self, path: str | os.PathLike[str]) -> str:
        with process_config_context(self._config):
            return process_file(path)

    def convert_stream(self, stream: BinaryIO) -> str:
        with process_config_context(self._config):
            return process_stream(stream)


__all__ = [
    "ASTRenderer",
    "Block",
    "BlockType",
    "DEFAULT_ENCODING",
    "Document",
    "HtmlRenderer",
    "Lexer",
    "Line",
    "LineType",
    "LinemarkError",
    "LinkRef",
    "LinkRefTable",
    "Markdown",
    "Parser",
    "ProcessConfig",
    "RenderError",
    "SourceReadError",
    "classify",
    "get_process_config",
    "parse",
    "process",
    "process_config_context",
    "process_file",
    "process_reader",
    "process_stream",
    "render",
    "reset_process_config",
    "set_process_config",
]
