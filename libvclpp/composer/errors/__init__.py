from .output_file_unwritable import OutputFileUnwritableError

__all__ = ["OutputFileUnwritableError"]
