"""Small study programs: bit tricks, checksums, key derivation, archives, storage, feeds and a helper process."""

__version__ = "0.1.0"