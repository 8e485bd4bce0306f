"""Commands package."""
from .blob_command import BlobCommand
from .clean_command import CleanCommand
from .copy_command import CopyCommand
from .format_command import FormatCommand
from .jwt_command import JwtCommand
from .validate_command import ValidateCommand

__all__ = ["BlobCommand", "CleanCommand", "CopyCommand", "FormatCommand", "JwtCommand", "ValidateCommand"]
