"""Parsing subsystem for linemark.

Subpackages:
- blocks: mixins that decompose a line sequence into a Block tree
- inline: span parsing used by the renderer (emphasis, code, links)
- charsets: character sets shared by the lexer and parsers

Modules are imported directly (``linemark.parsing.blocks``) rather than
re-exported here, because the lexer's classifiers depend on ``charsets``.

"""
