"""Writing rendered documents to files or streams."""

from pathlib import Path

from meal_billing.application.ports.document import Destination, DocumentSinkPort


class FileDocumentSink(DocumentSinkPort):
    """Write documents to a filesystem path or a writable binary stream.

    Missing parent directories are not created; a missing directory is
    reported as ``FileNotFoundError`` to the caller.
    """

    def write(self, payload: bytes, destination: Destination) -> Destination:
        if hasattr(destination, "write"):
            destination.write(payload)
            flush = getattr(destination, "flush", None)
            if flush is not None:
                flush()
            return destination
        Path(destination).write_bytes(payload)
        return destination


__all__ = ["FileDocumentSink"]
