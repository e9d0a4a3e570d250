"""Constants for stdout formatting."""

from __future__ import annotations

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_BLUE: str = "\033[34m"
ANSI_CYAN: str = "\033[36m"
ANSI_DIM: str = "\033[2m"

NAME_COLUMN_WIDTH: int = 25
INSTALL_DESCRIPTION_PREVIEW: int = 80
SYNC_DESCRIPTION_PREVIEW: int = 70

SUCCESS_MARK: str = "✅"
WARNING_MARK: str = "⚠️ "
