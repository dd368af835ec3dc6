class NoMovesError(RuntimeError):
    """Raised when a search algorithm needs a move but the neighborhood is empty."""

    def __init__(self, message: str = "There are no more available moves."):
        super().__init__(message)
