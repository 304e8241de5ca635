"""Exceptions for htmxkit.

Exception Hierarchy:
HtmxKitError (base)
├── BuildError                    # Tree construction failed
│   ├── UnsupportedArgumentError  # Builder received an unrecognized argument
│   └── InvalidNameError          # Empty or malformed tag/attribute name
├── UnknownAttributeError         # make() called with an unregistered behaviour
└── AssetNotFoundError            # Bundled payload missing from the install

Everything here is raised while a tree is being built or while a server is
starting up. Rendering a well-formed tree cannot fail.

Example:
    ```
    H-BLD-001: div() does not accept argument #2 of type 'int' (42)
      Hint: wrap text in str(), pass an Attribute, or pass a Node
    ```

"""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Searchable error codes for htmxkit errors.

    Format: H-{CATEGORY}-{NUMBER}
    Categories: BLD (tree building), ATR (attribute registry), AST (assets)
    """

    UNSUPPORTED_ARGUMENT = "H-BLD-001"
    INVALID_NAME = "H-BLD-002"

    UNKNOWN_ATTRIBUTE = "H-ATR-001"

    ASSET_NOT_FOUND = "H-AST-001"

    @property
    def category(self) -> str:
        """Error category (e.g., 'build', 'attribute', 'asset')."""
        prefix = self.value.split("-")[1]
        return {
            "BLD": "build",
            "ATR": "attribute",
            "AST": "asset",
        }.get(prefix, "unknown")


class HtmxKitError(Exception):
    """Base exception for all htmxkit errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
        hint: Optional one-line suggestion shown by format_compact().
    """

    code: ErrorCode | None = None
    hint: str | None = None

    def format_compact(self) -> str:
        """Format error as a short terminal diagnostic.

        Format::

            H-BLD-002: Invalid attribute name 'on click'
              Hint: names cannot contain whitespace, quotes, '/', '=' or '>'
        """
        header = str(self)
        if self.code and self.code.value not in header:
            header = f"{self.code.value}: {header}"
        parts = [header]
        if self.hint:
            parts.append(f"  Hint: {self.hint}")
        return "\n".join(parts)


class BuildError(HtmxKitError):
    """A node tree could not be constructed from the given arguments."""


class UnsupportedArgumentError(BuildError, TypeError):
    """Builder received a value that is neither an Attribute, a Node, nor text.

    Raised immediately from the builder call so integration mistakes surface
    at the line that made them:

        >>> div(hx_get("/x"), 42)
        UnsupportedArgumentError: div() does not accept argument #2 of type 'int' (42)

    """

    code = ErrorCode.UNSUPPORTED_ARGUMENT
    hint = "wrap text in str(), pass an Attribute, or pass a Node"

    def __init__(self, tag: str, position: int, value: object):
        self.tag = tag
        self.position = position
        self.value = value
        shown = repr(value)
        if len(shown) > 40:
            shown = shown[:37] + "..."
        super().__init__(
            f"{tag}() does not accept argument #{position} "
            f"of type {type(value).__name__!r} ({shown})"
        )


class InvalidNameError(BuildError, ValueError):
    """Tag or attribute name is empty or contains characters HTML forbids."""

    code = ErrorCode.INVALID_NAME
    hint = "names cannot be empty or contain whitespace, quotes, '/', '=' or '>'"

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Invalid {kind} name {name!r}")


class UnknownAttributeError(HtmxKitError, KeyError):
    """make() was asked for a behaviour the registry does not define."""

    code = ErrorCode.UNKNOWN_ATTRIBUTE

    def __init__(self, name: str, suggestion: str | None = None):
        self.name = name
        self.suggestion = suggestion
        if suggestion:
            self.hint = f"did you mean {suggestion!r}?"
        super().__init__(name)

    def __str__(self) -> str:
        message = f"Unknown htmx attribute {self.name!r}"
        if self.suggestion:
            message += f" (did you mean {self.suggestion!r}?)"
        return message


class AssetNotFoundError(HtmxKitError, FileNotFoundError):
    """The bundled JavaScript payload is missing from the installed package.

    This is a build configuration problem: the payload has to be provisioned
    with ``scripts/fetch_htmx.py`` before the package is built.
    """

    code = ErrorCode.ASSET_NOT_FOUND
    hint = "run scripts/fetch_htmx.py and reinstall the package"

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"Bundled asset {resource!r} is not present in the htmxkit package")

    def __str__(self) -> str:
        return self.args[0]


__all__ = [
    "AssetNotFoundError",
    "BuildError",
    "ErrorCode",
    "HtmxKitError",
    "InvalidNameError",
    "UnknownAttributeError",
    "UnsupportedArgumentError",
]
