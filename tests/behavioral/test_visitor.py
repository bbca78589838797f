import pytest

from design_patterns.behavioral.visitor import (
    DocumentVisitor,
    HtmlExporter,
    ImageDocument,
    PdfExporter,
    TextDocument,
)


def test_text_document_exports():
    document = TextDocument("a <b> c")
    assert document.accept(PdfExporter()) == "%PDF text: a <b> c"
    assert document.accept(HtmlExporter()) == "<p>a &lt;b&gt; c</p>"


def test_image_document_exports():
    image = ImageDocument("diagram.png", "Architecture")
    assert image.accept(PdfExporter()) == "%PDF image: diagram.png (Architecture)"
    assert image.accept(HtmlExporter()) == '<img src="diagram.png" alt="Architecture">'


def test_accept_dispatches_on_element_type():
    calls = []

    class Recorder(DocumentVisitor):
        def visit_text_document(self, document):
            calls.append("text")
            return "t"

        def visit_image_document(self, document):
            calls.append("image")
            return "i"

    TextDocument("x").accept(Recorder())
    ImageDocument("y.png").accept(Recorder())
    assert calls == ["text", "image"]


def test_accept_announces_visitor(capsys):
    TextDocument("x").accept(PdfExporter())
    assert "TextDocument is accepting a visitor: PdfExporter" in capsys.readouterr().out


def test_visitor_interface_is_abstract():
    with pytest.raises(TypeError):
        DocumentVisitor()
