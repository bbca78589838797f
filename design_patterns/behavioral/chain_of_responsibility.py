"""
Chain of Responsibility - File Handlers
=======================================

Core Design: A request travels along a chain of handlers; each one either
processes it or passes it to the next. A request nobody handles falls off
the end of the chain and yields None.
"""

from enum import Enum
from typing import Optional, Union


class FileType(Enum):
    PDF = "PDF"
    CSV = "CSV"
    TEXT = "TEXT"


def to_file_type(file_type: Union[FileType, str]) -> FileType:
    """Accept a FileType or its string value ('PDF', 'CSV', 'TEXT')"""
    try:
        return FileType(file_type)
    except ValueError:
        raise ValueError(f"Invalid file type: {file_type!r}") from None


class Handler:
    """Base handler, default behavior forwards to the next link"""

    handles: Optional[FileType] = None

    def __init__(self):
        self.next_handler: Optional['Handler'] = None

    def set_next(self, handler: 'Handler') -> 'Handler':
        self.next_handler = handler
        return handler

    def handle(self, file_type: Union[FileType, str]) -> Optional[str]:
        file_type = to_file_type(file_type)
        if self.handles is not None and file_type == self.handles:
            return self.process(file_type)
        if self.next_handler:
            return self.next_handler.handle(file_type)
        return None

    def process(self, file_type: FileType) -> str:
        result = f"Handling {file_type.value}"
        print(f"[{type(self).__name__}] {result}")
        return result


class PdfHandler(Handler):
    handles = FileType.PDF


class TextHandler(Handler):
    handles = FileType.TEXT


class CsvHandler(Handler):
    handles = FileType.CSV


def build_chain(*handlers: Handler) -> Handler:
    """Link handlers in the given order and return the head of the chain"""
    if not handlers:
        raise ValueError("A chain needs at least one handler")
    for current, following in zip(handlers, handlers[1:]):
        current.set_next(following)
    return handlers[0]


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("CHAIN OF RESPONSIBILITY DEMONSTRATION")
    print("=" * 60)
    print()

    pdf_handler = PdfHandler()
    pdf_handler.set_next(TextHandler()).set_next(CsvHandler())

    print("1. Requests routed along PDF -> TEXT -> CSV:")
    for file_type in (FileType.CSV, FileType.PDF, FileType.TEXT):
        pdf_handler.handle(file_type)
    print()

    print("2. Chain without a CSV handler:")
    short_chain = build_chain(PdfHandler(), TextHandler())
    print(f"  CSV result: {short_chain.handle(FileType.CSV)}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
