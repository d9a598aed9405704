"""
Hash algorithm registry.

Resolves algorithm names to fresh accumulators. Exact names are looked up
among registered strategies; names of the form ``git-<type>`` fall back to a
git object strategy for that object type.
"""

from ..core.exceptions import UnsupportedAlgorithmError
from .accumulators import HashAccumulator
from .strategies import (
    GitObjectStrategy,
    HashStrategy,
    MD5Strategy,
    SHA1Strategy,
    SHA256Strategy,
    SHA512Strategy,
)

DEFAULT_ALGORITHM = "sha256"


class HashAlgorithmRegistry:
    """
    Registry for hash algorithm strategies.

    Add new algorithms by registering new strategies without modifying
    existing code. Every resolve() returns a new accumulator; the registry
    itself holds no hashing state.

    Example:
        registry = HashAlgorithmRegistry()

        acc = registry.resolve("sha1")
        acc = registry.resolve("git-tree")

        # Register custom algorithm
        registry.register(MyCustomStrategy())
        acc = registry.resolve("my_custom")
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register built-in algorithms
        """
        self._strategies: dict[str, HashStrategy] = {}
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in hash algorithms."""
        self.register(SHA512Strategy())
        self.register(SHA256Strategy())
        self.register(SHA1Strategy())
        self.register(MD5Strategy())
        self.register(GitObjectStrategy("blob"))

    def register(self, strategy: HashStrategy) -> None:
        """
        Register a hash strategy.

        Args:
            strategy: HashStrategy implementation
        """
        self._strategies[strategy.algorithm_name] = strategy

    def get(self, algorithm: str) -> HashStrategy | None:
        """
        Get strategy by algorithm name.

        The empty name selects the default algorithm. Unregistered names
        starting with ``git-`` get a git object strategy whose object type
        is the remainder of the name.

        Args:
            algorithm: Algorithm name (e.g., 'sha256', 'git', 'git-tree')

        Returns:
            HashStrategy or None if not found
        """
        if algorithm == "":
            algorithm = DEFAULT_ALGORITHM

        strategy = self._strategies.get(algorithm)
        if strategy is not None:
            return strategy

        if algorithm.startswith(GitObjectStrategy.PREFIX):
            object_type = algorithm[len(GitObjectStrategy.PREFIX) :]
            if object_type:
                return GitObjectStrategy(object_type)

        return None

    def resolve(self, algorithm: str) -> HashAccumulator:
        """
        Create a fresh accumulator for the given algorithm.

        Args:
            algorithm: Algorithm name

        Returns:
            New HashAccumulator instance

        Raises:
            UnsupportedAlgorithmError: If algorithm is unknown
        """
        strategy = self.get(algorithm)
        if strategy is None:
            raise UnsupportedAlgorithmError(algorithm)
        return strategy.create_accumulator()

    def default(self) -> HashAccumulator:
        """Create a fresh accumulator for the default algorithm."""
        return self.resolve(DEFAULT_ALGORITHM)

    def canonical_name(self, algorithm: str) -> str:
        """
        Return the canonical spelling of an algorithm name.

        '' becomes 'sha256' and 'git-blob' becomes 'git'.

        Raises:
            UnsupportedAlgorithmError: If algorithm is unknown
        """
        strategy = self.get(algorithm)
        if strategy is None:
            raise UnsupportedAlgorithmError(algorithm)
        return strategy.algorithm_name

    def is_supported(self, algorithm: str) -> bool:
        """Check whether algorithm resolves to a strategy."""
        return self.get(algorithm) is not None

    def compute_hash(self, algorithm: str, data: bytes) -> str:
        """
        Compute hash of data using the specified algorithm.

        Args:
            algorithm: Algorithm name
            data: Data to hash

        Returns:
            Hex-encoded hash digest
        """
        strategy = self.get(algorithm)
        if strategy is None:
            raise UnsupportedAlgorithmError(algorithm)
        return strategy.hexdigest(data)

    @property
    def available_algorithms(self) -> list[str]:
        """List registered algorithm names (git-<type> variants are implicit)."""
        return list(self._strategies.keys())

    def __contains__(self, algorithm: str) -> bool:
        """Check if algorithm is registered or resolvable."""
        return self.is_supported(algorithm)


def get_registry() -> HashAlgorithmRegistry:
    """Return the container's registry, or a fresh default one."""
    from ..core.di import resolve_or_default

    return resolve_or_default(HashAlgorithmRegistry, HashAlgorithmRegistry)


def new(algorithm: str = "") -> HashAccumulator:
    """
    Create a fresh accumulator for algorithm.

    Supported algorithms: 'sha512', 'sha256', 'sha1', 'md5', 'git',
    'git-<type>'. The empty name selects the default (sha256).
    """
    return get_registry().resolve(algorithm)


def default_accumulator() -> HashAccumulator:
    """Create a fresh accumulator for the default algorithm."""
    return get_registry().default()
