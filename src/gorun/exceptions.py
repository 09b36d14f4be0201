# Custom exceptions for gorun

class GorunError(Exception):
    """Base exception for all application-specific errors."""
    pass

class EmptyArgumentError(GorunError):
    """Raised when a required argument is an empty string."""
    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} must not be empty")

class ParserError(GorunError):
    """Raised when a Go source file cannot be parsed by tree-sitter."""
    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        self.message = message
        super().__init__(f"Failed to parse {file_path}: {message}")

class SourceNotFoundError(ParserError):
    """Raised when the Go source file to parse does not exist."""
    def __init__(self, file_path: str):
        super().__init__(file_path, "no such file or directory")

    def __str__(self):
        # Same wording as the go toolchain's open errors
        return f"open {self.file_path}: {self.message}"

class FunctionNotFoundError(GorunError):
    """Raised when a top-level func cannot be found."""
    pass

class SignatureError(GorunError):
    """Raised when a func has arguments or return values where none are allowed."""
    pass

class EmptyNameError(GorunError):
    """Raised when renaming something to an empty identifier."""
    pass

class GoModuleNotFoundError(GorunError):
    """Raised when no go.mod can be found toward the filesystem root."""
    pass

class OutsideModuleError(GorunError):
    """Raised when a target file is not inside the discovered go module."""
    def __init__(self, file_path: str, module_dir: str):
        self.file_path = file_path
        self.module_dir = module_dir
        super().__init__(f"file '{file_path}' must be in go module dir '{module_dir}'")

class ToolchainMissingError(GorunError):
    """Raised when the go binary cannot be resolved on PATH."""
    def __init__(self, binary: str):
        self.binary = binary
        super().__init__(f'exec: "{binary}": executable file not found in $PATH')

class ToolchainCommandError(GorunError):
    """Raised when a go subcommand exits with a nonzero status."""
    def __init__(self, returncode: int, command: list = None):
        self.returncode = returncode
        self.command = command or []
        super().__init__(f"exit status {returncode}")

class ConfigError(GorunError):
    """Raised for configuration-related problems."""
    pass
