class UserCmdError(Exception):
    pass


class ArgumentError(UserCmdError):
    pass


class MissingOperation(ArgumentError):
    def __init__(self):
        super().__init__("-operation flag has to be specified")


class InvalidOperation(ArgumentError):
    operation: str

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Operation {operation} not allowed!")


class MissingItem(ArgumentError):
    def __init__(self):
        super().__init__("-item flag has to be specified")


class MissingId(ArgumentError):
    def __init__(self):
        super().__init__("-id flag has to be specified")


class MissingFileName(ArgumentError):
    def __init__(self):
        super().__init__("-fileName flag has to be specified")


class InvalidFileExtension(ArgumentError):
    file_name: str

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__("bad file extension. Use -h to see allowed extensions")


class ParseError(UserCmdError):
    source: str
    detail: str

    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"Failed to parse {source}: {detail}")


class StorageError(UserCmdError):
    file_name: str
    original_error: OSError

    def __init__(self, file_name: str, original_error: OSError):
        self.file_name = file_name
        self.original_error = original_error
        reason = original_error.strerror or str(original_error)
        super().__init__(f"{file_name}: {reason}")
