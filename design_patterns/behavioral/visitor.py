"""
Visitor Pattern - Document Export
=================================

Core Design: Export operations live in visitor classes; documents only
accept a visitor and dispatch to the method matching their own type.
New export formats need no change to the document classes.

Participants:
1. Element Interface - Visitable.accept()
2. Concrete Elements - TextDocument, ImageDocument
3. Visitor Interface - DocumentVisitor
4. Concrete Visitors - PdfExporter, HtmlExporter
"""

import html
from abc import ABC, abstractmethod


class DocumentVisitor(ABC):

    @abstractmethod
    def visit_text_document(self, document: 'TextDocument') -> str:
        pass

    @abstractmethod
    def visit_image_document(self, document: 'ImageDocument') -> str:
        pass


class Visitable(ABC):

    @abstractmethod
    def accept(self, visitor: DocumentVisitor) -> str:
        pass


class TextDocument(Visitable):

    def __init__(self, content: str):
        self.content = content

    def get_content(self) -> str:
        return self.content

    def accept(self, visitor: DocumentVisitor) -> str:
        print(f"TextDocument is accepting a visitor: {type(visitor).__name__}")
        return visitor.visit_text_document(self)


class ImageDocument(Visitable):

    def __init__(self, filename: str, caption: str = ""):
        self.filename = filename
        self.caption = caption

    def accept(self, visitor: DocumentVisitor) -> str:
        print(f"ImageDocument is accepting a visitor: {type(visitor).__name__}")
        return visitor.visit_image_document(self)


# ==================== VISITORS ====================

class PdfExporter(DocumentVisitor):

    def visit_text_document(self, document: TextDocument) -> str:
        print("Exporting to PDF...")
        exported = f"%PDF text: {document.get_content()}"
        print("Export successful!")
        return exported

    def visit_image_document(self, document: ImageDocument) -> str:
        print("Exporting image to PDF...")
        exported = f"%PDF image: {document.filename}"
        if document.caption:
            exported += f" ({document.caption})"
        print("Export successful!")
        return exported


class HtmlExporter(DocumentVisitor):

    def visit_text_document(self, document: TextDocument) -> str:
        print("Exporting to HTML...")
        exported = f"<p>{html.escape(document.get_content())}</p>"
        print("Export complete!")
        return exported

    def visit_image_document(self, document: ImageDocument) -> str:
        print("Exporting image to HTML...")
        exported = (f"<img src=\"{html.escape(document.filename)}\" "
                    f"alt=\"{html.escape(document.caption)}\">")
        print("Export complete!")
        return exported


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("VISITOR PATTERN DEMONSTRATION")
    print("=" * 60)
    print()

    documents = [
        TextDocument("This is a sample text document."),
        ImageDocument("diagram.png", "Architecture"),
    ]
    exporters = [PdfExporter(), HtmlExporter()]

    for exporter in exporters:
        for document in documents:
            print(f"  => {document.accept(exporter)}")
        print("-" * 30)
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
