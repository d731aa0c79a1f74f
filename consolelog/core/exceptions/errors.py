class ConsoleLogError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidTemplateError(ConsoleLogError):
    pass


class RenderError(ConsoleLogError):
    pass


class UnsupportedLevelError(ConsoleLogError):
    def __init__(self, message: str, level: object) -> None:
        self.level = level
        super().__init__(message)


class UnknownLevelError(ConsoleLogError):
    def __init__(self, message: str, name: str) -> None:
        self.name = name
        super().__init__(message)


class NotInitializedError(ConsoleLogError):
    pass
