from typing import override


class RouteDecodeError(ValueError):
    """
    Base class for failures while decoding a route service document.

    The path is the dotted field path within the document, empty for the root.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path

    @override
    def __str__(self) -> str:
        message = super().__str__()
        return f'{message} (at {self.path})' if self.path else message


class MissingFieldError(RouteDecodeError):
    def __init__(self, path: str) -> None:
        super().__init__(path, 'Missing required field')


class UnknownVariantError(RouteDecodeError):
    def __init__(self, path: str, value: str) -> None:
        super().__init__(path, f'Unknown variant {value!r}')
        self.value = value


class TypeMismatchError(RouteDecodeError):
    def __init__(self, path: str, expected: str) -> None:
        super().__init__(path, f'Expected {expected}')
        self.expected = expected


class MalformedDocumentError(RouteDecodeError):
    def __init__(self, message: str) -> None:
        super().__init__('', message)
