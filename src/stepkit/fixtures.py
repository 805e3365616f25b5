"""Response fixtures stored on the filesystem.

Fixtures are files below a root directory, addressed by paths relative
to that root. Lookups never escape the root directory.
"""

from pathlib import Path

from stepkit.errors import ResourceUnavailable


class FixtureResolver:
    """Resolver of fixture files below a root directory."""

    def __init__(self, root: Path | str) -> None:
        """Initialize the resolver.

        Args:
            root: Directory holding the fixtures.
        """
        self.root = Path(root)

    def path_for(self, path: str) -> Path:
        """Resolve a relative fixture path.

        Args:
            path: Fixture path relative to the root.

        Returns:
            The absolute path of an existing fixture file.

        Raises:
            ResourceUnavailable: If the fixture does not exist or
                lies outside the fixture root.
        """
        root = self.root.resolve()
        candidate = (root / path).resolve()

        if not candidate.is_relative_to(root):
            raise ResourceUnavailable(f'Fixture {path!r} is outside of {root}')

        if not candidate.is_file():
            raise ResourceUnavailable(f'Fixture {path!r} not found in {root}')

        return candidate

    def read_bytes(self, path: str) -> bytes:
        """Read the contents of a fixture.

        Raises:
            ResourceUnavailable: If the fixture can not be found or read.
        """
        fixture = self.path_for(path)

        try:
            return fixture.read_bytes()

        except OSError as base:
            raise ResourceUnavailable(f'Fixture {path!r} is unreadable') from base

    def read_text(self, path: str, encoding: str = 'utf-8') -> str:
        """Read the contents of a fixture as text."""
        return self.read_bytes(path).decode(encoding)

    def available(self) -> list[str]:
        """List all fixture paths below the root, sorted."""
        if not self.root.is_dir():
            return []

        return sorted(
            item.relative_to(self.root).as_posix()
            for item in self.root.rglob('*')
            if item.is_file()
        )
