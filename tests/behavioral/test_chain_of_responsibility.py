import pytest

from design_patterns.behavioral.chain_of_responsibility import (
    CsvHandler,
    FileType,
    PdfHandler,
    TextHandler,
    build_chain,
)


def test_set_next_returns_handler_for_chaining():
    pdf, text = PdfHandler(), TextHandler()
    assert pdf.set_next(text) is text


@pytest.mark.parametrize("file_type", list(FileType))
def test_each_type_is_handled_along_the_chain(file_type):
    head = PdfHandler()
    head.set_next(TextHandler()).set_next(CsvHandler())
    assert head.handle(file_type) == f"Handling {file_type.value}"


def test_unhandled_request_falls_off_the_chain():
    head = build_chain(PdfHandler(), TextHandler())
    assert head.handle(FileType.CSV) is None


def test_only_matching_handler_processes(capsys):
    head = build_chain(PdfHandler(), TextHandler(), CsvHandler())
    head.handle(FileType.TEXT)
    out = capsys.readouterr().out
    assert out.strip() == "[TextHandler] Handling TEXT"


def test_build_chain_requires_handlers():
    with pytest.raises(ValueError):
        build_chain()


@pytest.mark.parametrize("file_type", ["PDF", "CSV", "TEXT"])
def test_string_file_types_are_accepted(file_type):
    head = build_chain(PdfHandler(), TextHandler(), CsvHandler())
    assert head.handle(file_type) == f"Handling {file_type}"


def test_unknown_string_file_type_is_rejected():
    with pytest.raises(ValueError, match="Invalid file type"):
        PdfHandler().handle("DOCX")
