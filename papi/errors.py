"""API errors that render as JSON error documents."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

DEFAULT_STATUS = 400


@runtime_checkable
class ErrorDocumentor(Protocol):
    """Anything with an HTTP status that can render an error document."""

    @property
    def status(self) -> int: ...

    def error_document(self) -> dict[str, Any]: ...


class Error(Exception):
    """A single API error with an HTTP status and optional context."""

    def __init__(
        self,
        code: str,
        message: str,
        status: int = DEFAULT_STATUS,
        *,
        location: str = "",
        expect: str = "",
        details: str = "",
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.message = message
        self.location = location
        self.expect = expect
        self.details = details

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"Error(code={self.code!r}, message={self.message!r}, "
            f"status={self.status!r}, location={self.location!r}, "
            f"expect={self.expect!r}, details={self.details!r})"
        )

    def to_dict(self) -> dict[str, str]:
        """The error as a JSON object; empty optional fields are left out."""
        doc = {"code": self.code, "message": self.message}
        for key in ("location", "expect", "details"):
            value = getattr(self, key)
            if value:
                doc[key] = value
        return doc

    def error_document(self) -> dict[str, Any]:
        """A document of the form ``{"errors": [...]}`` holding this error."""
        return {"errors": [self.to_dict()]}

    def reset(self) -> None:
        self.status = 0
        self.code = ""
        self.message = ""
        self.location = ""
        self.expect = ""


class Errors(Exception):
    """A collection of errors reported together."""

    def __init__(self, errors: Iterable[Error] = ()) -> None:
        super().__init__()
        self._items: list[Error] = list(errors)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Error]:
        return iter(self._items)

    def __getitem__(self, idx: int) -> Error:
        return self._items[idx]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Errors({self._items!r})"

    def append(self, err: Error) -> None:
        self._items.append(err)

    def merge(self, errors: Iterable[Error]) -> None:
        self._items.extend(errors)

    def reset(self) -> None:
        for err in self._items:
            err.reset()
        self._items.clear()

    def has_error(self) -> bool:
        return bool(self._items)

    @property
    def status(self) -> int:
        """Status of the first error, or 200 when there is none."""
        if not self._items:
            return 200
        return self._items[0].status

    def __str__(self) -> str:
        if not self._items:
            return "(no error)"
        return "\n".join(_describe(err) for err in self._items)

    def to_list(self) -> list[dict[str, str]]:
        return [err.to_dict() for err in self._items]

    def error_document(self) -> dict[str, Any]:
        return {"errors": self.to_list()}


def _describe(err: Error) -> str:
    text = f"{err.code}: {err.message}"
    if err.location:
        text = f"{err.location} - {text}"
    if err.expect:
        text = f"{text} ({err.expect})"
    return text


@dataclass(frozen=True)
class FrozenError:
    """An immutable error template used to spawn explained errors."""

    code: str
    message: str
    status: int = DEFAULT_STATUS

    def explained(self, location: str, expect: str = "") -> Error:
        """A new :class:`Error` concerning ``location``, with what was expected."""
        return Error(
            self.code, self.message, self.status, location=location, expect=expect
        )

    def detailed(self, details: str, location: str = "") -> Error:
        """A new :class:`Error` carrying technical ``details``."""
        return Error(
            self.code, self.message, self.status, location=location, details=details
        )

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}

    def error_document(self) -> dict[str, Any]:
        return {"errors": [self.to_dict()]}


NOT_FOUND = FrozenError("NOT_FOUND", "The API route could not be found", 404)
INVALID_PARAMS = FrozenError("INVALID_PARAMS", "URL params count mismatch", 500)
UNKNOWN_ERROR = FrozenError("UNKNOWN_ERROR", "An unknown error occured", 500)


class InvalidOpenAPIError(ValueError):
    """The OpenAPI document given to the API already has operations."""

    def __init__(
        self,
        message: str = "there must not be any existing operations in OpenAPI documentation",
    ) -> None:
        super().__init__(message)


class MissingOpenAPIError(LookupError):
    """No OpenAPI document was set up."""

    def __init__(self, message: str = "no OpenAPI documentation initialized") -> None:
        super().__init__(message)


class MissingRoutePathError(ValueError):
    """A route was registered without a path."""

    def __init__(self, message: str = "missing route path") -> None:
        super().__init__(message)


class MissingRouteHandlerError(ValueError):
    """A route was registered without a handler."""

    def __init__(self, message: str = "missing route handler") -> None:
        super().__init__(message)


class MissingRouteMethodError(ValueError):
    """A route was registered without a method."""

    def __init__(self, message: str = "missing route method") -> None:
        super().__init__(message)