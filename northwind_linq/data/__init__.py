"""Static fixture data bundled with the package."""
