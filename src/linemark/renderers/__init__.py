"""linemark renderers.

Renderers walk the Block tree produced by the parser and emit output.

Available Renderers:
- HtmlRenderer: XHTML-style markup using the StringBuilder pattern

Thread Safety:
Renderers keep per-call state local to render(); a single instance may be
shared across threads.

"""

from linemark.renderers.html import HtmlRenderer
from linemark.renderers.protocol import ASTRenderer

__all__ = ["ASTRenderer", "HtmlRenderer"]
