"""tact-cli — command-line front end for the Tact compiler.

Resolves flags into a single compilation or evaluation request and
dispatches it to a pluggable compiler backend.
"""

from tact_cli.version import __version__

__all__: list[str] = ["__version__"]
