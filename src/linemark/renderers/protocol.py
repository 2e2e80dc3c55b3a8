"""ASTRenderer protocol: the interface between the block tree and output.

Any renderer that implements ``render(doc) -> str`` conforms. The built-in
``HtmlRenderer`` is the reference implementation.

Example:
    from linemark.renderers.protocol import ASTRenderer

    def publish(renderer: ASTRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol, runtime_checkable

from linemark.blocks import Document


@runtime_checkable
class ASTRenderer(Protocol):
    """Protocol for block tree renderers."""

    def render(self, doc: Document) -> str:
        """Render a parsed Document to a string.

        Args:
            doc: Parsed document (block tree plus link references)

        Returns:
            Rendered output.

        """
        ...
