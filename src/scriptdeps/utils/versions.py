"""Structured package/binary version parsing and comparison."""

from __future__ import annotations

from dataclasses import dataclass

from scriptdeps.constants.runtime import PINNED_VERSION_PATTERN, VERSION_PATTERN


@dataclass(frozen=True, eq=False)
class PackageVersion:
    """A numeric version of up to four segments with an optional pre-release label.

    Ordering is segment-wise numeric, so ``10.0`` sorts above ``9.0``. Missing
    segments count as zero and a release sorts above any of its pre-releases.
    """

    numbers: tuple[int, int, int, int]
    prerelease: str = ""
    original: str = ""

    @classmethod
    def parse(cls, text: str) -> PackageVersion:
        """Parse *text*, raising ``ValueError`` when it is not a version."""
        match = VERSION_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Invalid version: {text!r}")
        parts = [int(part) for part in match.group("numbers").split(".")]
        parts.extend([0] * (4 - len(parts)))
        return cls(
            numbers=(parts[0], parts[1], parts[2], parts[3]),
            prerelease=match.group("prerelease") or "",
            original=text.strip(),
        )

    @classmethod
    def try_parse(cls, text: str | None) -> PackageVersion | None:
        """Parse *text*, returning ``None`` instead of raising."""
        if not text:
            return None
        try:
            return cls.parse(text)
        except ValueError:
            return None

    @property
    def major(self) -> int:
        return self.numbers[0]

    @property
    def minor(self) -> int:
        return self.numbers[1]

    def sort_key(self) -> tuple[tuple[int, ...], int, tuple[tuple[int, int | str], ...]]:
        """Return a key implementing release-over-prerelease ordering."""
        if not self.prerelease:
            return (self.numbers, 1, ())
        labels: list[tuple[int, int | str]] = []
        for label in self.prerelease.split("."):
            if label.isdigit():
                labels.append((0, int(label)))
            else:
                labels.append((1, label.lower()))
        return (self.numbers, 0, tuple(labels))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def __lt__(self, other: PackageVersion) -> bool:
        return self.sort_key() < other.sort_key()

    def __le__(self, other: PackageVersion) -> bool:
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: PackageVersion) -> bool:
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: PackageVersion) -> bool:
        return self.sort_key() >= other.sort_key()

    def __str__(self) -> str:
        return self.original or ".".join(str(part) for part in self.numbers)


def is_pinned_version(version: str) -> bool:
    """Return True when *version* names exactly one release.

    Empty versions, wildcards, open ranges and two-segment versions float.
    """
    return bool(PINNED_VERSION_PATTERN.match(version.strip()))
