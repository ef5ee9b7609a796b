"""
Office machines built on segregated capability interfaces.

IMachine bundles print, scan and fax, so a printer that can only print
still has to define the other two. The narrow interfaces let each device
implement exactly what it supports, and MultiFunctionMachine recombines
them by delegating to injected components.
"""

from ..core.exceptions import UnsupportedOperationError
from ..core.logging_config import get_logger
from ..core.validation import require_instance, require_not_none
from ..domain.entities import Document
from ..domain.interfaces import (
    IFax,
    IMachine,
    IMultiFunctionDevice,
    IPrinter,
    IScanner,
)

logger = get_logger(__name__)


def _run(device: object, operation: str, document: Document) -> str:
    require_instance(document, Document, "document")
    logger.info(
        f"{type(device).__name__}: {operation} '{document.title}'",
        extra={"context": {"device": type(device).__name__, "operation": operation}},
    )
    return f"{operation} '{document.title}'"


# ===========================
# Fat interface implementations
# ===========================


class MultiFunctionPrinter(IMachine):
    """Fine with IMachine: it really does everything."""

    def print(self, document: Document) -> str:
        return _run(self, "Printed", document)

    def scan(self, document: Document) -> str:
        return _run(self, "Scanned", document)

    def fax(self, document: Document) -> str:
        return _run(self, "Faxed", document)


class OldFashionPrinter(IMachine):
    """Can only print, yet IMachine makes it define scan and fax."""

    def print(self, document: Document) -> str:
        return _run(self, "Printed", document)

    def scan(self, document: Document) -> str:
        raise UnsupportedOperationError("OldFashionPrinter cannot scan")

    def fax(self, document: Document) -> str:
        raise UnsupportedOperationError("OldFashionPrinter cannot fax")


# ===========================
# Segregated implementations
# ===========================


class Printer(IPrinter):
    def print(self, document: Document) -> str:
        return _run(self, "Printed", document)


class Scanner(IScanner):
    def scan(self, document: Document) -> str:
        return _run(self, "Scanned", document)


class FaxMachine(IFax):
    def fax(self, document: Document) -> str:
        return _run(self, "Faxed", document)


class PhotoCopier(IPrinter, IScanner):
    def print(self, document: Document) -> str:
        return _run(self, "Printed", document)

    def scan(self, document: Document) -> str:
        return _run(self, "Scanned", document)


class MultiFunctionMachine(IMultiFunctionDevice):
    """Print and scan by delegating to the injected components."""

    def __init__(self, printer: IPrinter, scanner: IScanner):
        self.printer = require_not_none(printer, "printer")
        self.scanner = require_not_none(scanner, "scanner")

    def print(self, document: Document) -> str:
        return self.printer.print(document)

    def scan(self, document: Document) -> str:
        return self.scanner.scan(document)
