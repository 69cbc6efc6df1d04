"""rung-cli — interactive scaffolding and parameter prompting for Rung extensions.

Interviews the user through typed parameter declarations and generates
starter extension projects on disk.
"""

from rung_cli.version import __version__

__all__: list[str] = ["__version__"]
