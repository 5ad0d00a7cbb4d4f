"""Exceptions for hostlist app."""


class HostlistDirectoryError(Exception):
    """Raised when the hostlist directory cannot be opened."""

    def __init__(self, directory: str) -> None:
        """Initialize HostlistDirectoryError.

        Args:
            directory: Path of the directory that failed to open.
        """
        self.directory = directory
        super().__init__(f'Cannot open directory {directory}.')
