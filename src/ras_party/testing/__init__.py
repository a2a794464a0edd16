"""Testing – test doubles shipped with the package."""
