class DocumentLoadError(Exception):
    """Raised by document loaders when a target cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot load {path}: {reason}")
        self.path = path


class ReferenceResolutionError(Exception):
    """Base class for failures while resolving a ``$ref`` value."""

    def __init__(self, reference: str, message: str) -> None:
        super().__init__(message)
        self.reference = reference


class UnsupportedSchemeError(ReferenceResolutionError):
    def __init__(self, reference: str, scheme: str) -> None:
        super().__init__(reference, f"Unsupported URI scheme '{scheme}' in reference: {reference}")
        self.scheme = scheme


class MalformedReferenceError(ReferenceResolutionError):
    def __init__(self, reference: str, reason: str) -> None:
        super().__init__(reference, f"Malformed reference {reference!r}: {reason}")


class TargetNotFoundError(ReferenceResolutionError):
    def __init__(self, reference: str, path: str) -> None:
        super().__init__(reference, f"File not found: {path}")
        self.path = path


class UnparsableDocumentError(ReferenceResolutionError):
    def __init__(self, reference: str, path: str) -> None:
        super().__init__(reference, f"Document is not valid JSON: {path}")
        self.path = path


class PointerNotFoundError(ReferenceResolutionError):
    def __init__(self, reference: str, pointer: str) -> None:
        super().__init__(reference, f"JSON pointer does not resolve: #{pointer}")
        self.pointer = pointer
