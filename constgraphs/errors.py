class IndexOutOfRangeError(IndexError):
    """Raised when a vertex index falls outside ``[0, size)``.

    Parameters
    ----------
    index : int
        The offending vertex index.
    size : int
        Side length of the adjacency matrix that rejected it.

    """

    def __init__(self, index, size):
        self.index = index
        self.size = size
        super().__init__(f"vertex index {index} out of range for graph of size {size}")
