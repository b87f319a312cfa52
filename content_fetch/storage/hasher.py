import hashlib

# shake_* digests are variable-length and need an explicit size.
SUPPORTED_ALGORITHMS = frozenset(
    name for name in hashlib.algorithms_guaranteed if not name.startswith("shake_")
)


class ContentHasher:
    """Content-addressing function: same content always yields the same digest."""

    def __init__(self, algorithm: str = "sha256") -> None:
        algorithm = algorithm.lower()
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(
                f"Unknown hash algorithm '{algorithm}'. "
                f"Choose from: {sorted(SUPPORTED_ALGORITHMS)}"
            )
        self._algorithm = algorithm

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def hash(self, content: str | bytes) -> str:
        """Return the hex digest of content. Text is hashed as UTF-8."""
        data = content.encode("utf-8") if isinstance(content, str) else content
        return hashlib.new(self._algorithm, data).hexdigest()
