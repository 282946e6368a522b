class HashValueError(ValueError):
    pass

class NullInputError(HashValueError):

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} cannot be None")
        self.argument = argument

class InvalidFormatError(HashValueError):

    def __init__(self, message: str, argument: str) -> None:
        super().__init__(message)
        self.argument = argument

class InvalidFormatSpecifierError(HashValueError):

    def __init__(self, format_spec: object) -> None:
        super().__init__(f"Invalid hash format specified: {format_spec!r}")
        self.format_spec = format_spec

class InvalidArgumentTypeError(HashValueError, TypeError):
    pass

class UnsupportedAlgorithmError(HashValueError, KeyError):

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"Unsupported digest algorithm: {algorithm}")
        self.algorithm = algorithm

    def __str__(self) -> str:
        return self.args[0]
