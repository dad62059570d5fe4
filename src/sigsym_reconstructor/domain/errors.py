#!/usr/bin/env python3

"""Error taxonomy for symbol and type reconstruction.

Errors fall into three families:

- ``SymbolResolutionError``: scoped to a single symbol spec. The symbol finder
  collects these as warnings and carries on with the next spec.
- ``StructuralError``: raised while walking declarations. A struct or function
  that cannot be fully translated aborts the whole run.
- ``UpstreamError``: failures reported by the C front end, the binary reader
  or the debug-info writer. Always fatal.
"""


class ReconstructionError(Exception):
    """Base class for every error raised by the reconstructor."""


class ConfigurationError(ReconstructionError, ValueError):
    """The symbol configuration document is malformed."""


# ---------------------------------------------------------------------------
# Per-symbol, recoverable
# ---------------------------------------------------------------------------


class SymbolResolutionError(ReconstructionError):
    """A single symbol could not be located. Reported as a warning."""


class BadPatternError(SymbolResolutionError):
    """Malformed pattern, or arithmetic/read failure while resolving it.

    ``name`` is empty when the pattern is compiled outside of a symbol.
    """

    def __init__(self, pattern: str, name: str = ""):
        self.pattern = pattern
        self.name = name
        where = f" ({name!r})" if name else ""
        super().__init__(f"Bad pattern detected{where}! {pattern}")


class PatternNotFoundError(SymbolResolutionError):
    """The compiled pattern does not occur in the binary."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Pattern {name!r} was not found!")


class UnmappedAddressError(SymbolResolutionError):
    """The resolved address lies outside every section of the image."""

    def __init__(self, name: str, pattern: str):
        self.name = name
        self.pattern = pattern
        super().__init__(
            f"{name!r} ({pattern!r}) could not be translated. "
            "Please check relative and rip_relative!"
        )


# ---------------------------------------------------------------------------
# Structural, fatal
# ---------------------------------------------------------------------------


class StructuralError(ReconstructionError):
    """A declaration could not be translated into debug-info records."""


class InvalidFuncNameError(StructuralError):
    def __init__(self, location: str):
        self.location = location
        super().__init__(f"Invalid function name: {location}")


class InvalidFuncError(StructuralError):
    def __init__(self, location: str):
        self.location = location
        super().__init__(f"Invalid function: {location}")


class InvalidFuncArgsError(StructuralError):
    def __init__(self, function: str):
        self.function = function
        super().__init__(f"Invalid function args: {function}")


class InvalidRetnTypeError(StructuralError):
    def __init__(self, function: str):
        self.function = function
        super().__init__(f"Invalid return type for {function}")


class InvalidCConvError(StructuralError):
    def __init__(self, function: str):
        self.function = function
        super().__init__(f"Invalid calling convention for {function}")


class InvalidNameError(StructuralError):
    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Invalid {kind} name for {name}")


class UnknownTypeError(StructuralError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown type: {name}")


class InvalidStructError(StructuralError):
    def __init__(self, name: str = ""):
        self.name = name
        super().__init__(f"Invalid struct {name}".rstrip())


class InvalidStructSizeError(StructuralError):
    def __init__(self, name: str = ""):
        self.name = name
        super().__init__(f"Invalid struct size {name}".rstrip())


class InvalidOffsetError(StructuralError):
    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(f"Invalid field offset {message}".rstrip())


class TypeTranslationError(StructuralError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Error during type translation: {message}")


class InvalidFieldError(StructuralError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Invalid struct field: {message}")


# ---------------------------------------------------------------------------
# Upstream collaborators, fatal
# ---------------------------------------------------------------------------


class UpstreamError(ReconstructionError):
    """Failure reported by an external collaborator."""


class SourceParseError(UpstreamError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Error during parsing: {message}")


class BinaryFormatError(UpstreamError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Error while reading binary: {message}")


class DebugInfoWriteError(UpstreamError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Error during debug-info generation: {message}")
