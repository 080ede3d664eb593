class ScanCancelledError(Exception):
    """
    Exception raised when a tree build is aborted through its cancellation event.

    The build checks the event before visiting each directory, so the exception carries
    the path of the directory that was about to be visited.

    Attributes:
        path (str): Directory the build was about to visit when it stopped.

    Example:
        >>> error = ScanCancelledError("/srv/data/archive")
        >>> str(error)
        'Scan cancelled before visiting /srv/data/archive'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the directory that was not visited.

        Args:
            path (str): Directory the build was about to visit.
        """
        self.path = path
        super().__init__(f"Scan cancelled before visiting {path}")
