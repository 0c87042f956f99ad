# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Optional REST interface for the LCA engine (requires the ``api`` extra)."""


def check_dependency(package: str, install_hint: str) -> None:
    """Raise *ImportError* with a helpful message if *package* is missing."""
    try:
        __import__(package)
    except ImportError:
        raise ImportError(
            f"API feature requires '{package}'. Install with: {install_hint}"
        ) from None
