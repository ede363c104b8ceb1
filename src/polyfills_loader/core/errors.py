"""Error types for polyfill resolution and materialization."""


class PolyfillsLoaderError(Exception):
    """Base error for all polyfill resolution and build failures."""


class PolyfillConfigurationError(PolyfillsLoaderError):
    """The polyfill flags form an invalid combination."""


class SourceNotFoundError(PolyfillsLoaderError):
    """A source locator could not find a package-style specifier."""

    def __init__(self, specifier: str) -> None:
        self.specifier = specifier
        super().__init__(f"Cannot locate polyfill source: {specifier}")


class PolyfillResolutionError(PolyfillsLoaderError):
    """The source of a named polyfill could not be located."""

    def __init__(self, name: str, specifier: str = "") -> None:
        self.name = name
        self.specifier = specifier
        msg = f"Error resolving polyfill {name}"
        if specifier:
            msg += f" ({specifier})"
        super().__init__(msg + ". Are dependencies installed correctly?")


class PolyfillValidationError(PolyfillsLoaderError):
    """A polyfill config lacks a name or sources."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(
            "A polyfill should have a name and a path property" + (f": {detail}" if detail else "")
        )


class PolyfillReadError(PolyfillsLoaderError):
    """A polyfill source file is missing or unreadable."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Could not find a file at {path}" + (f": {detail}" if detail else ""))


class MinificationError(PolyfillsLoaderError):
    """The minifier failed on a polyfill's content."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Minification failed for polyfill: {name}" + (f": {detail}" if detail else ""))
