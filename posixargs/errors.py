from . import const


class ArgsError(RuntimeError):
    """
    Base class for every error raised while validating a schema or scanning
    tokens. `code` mirrors the error codes of other POSIX-style parsers so
    callers can switch on it without importing the subclasses.
    """

    code: str = ""


class InvalidArgumentType(ArgsError):
    """A configuration input has the wrong shape."""

    code = const.ERR_INVALID_ARG_TYPE

    @classmethod
    def expected(cls, name: str, what: str, got: object) -> "InvalidArgumentType":
        return cls(f"The '{name}' argument must be {what}, got {type(got).__name__}")


class InvalidArgumentValue(ArgsError):
    code = const.ERR_INVALID_ARG_VALUE


class UnknownOptionError(ArgsError):
    """
    Raised in strict mode when an option is absent from the schema.
    """

    code = const.ERR_UNKNOWN_OPTION

    def __init__(self, name: str):
        super().__init__(f"Unknown option '{name}'")
        self.name = name


class InvalidOptionValue(ArgsError):
    code = const.ERR_INVALID_OPTION_VALUE

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name
