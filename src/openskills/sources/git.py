"""Shallow-clone repositories through the ``git`` executable."""

from __future__ import annotations

import logging
import subprocess
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from openskills.constants.discovery import CLONE_CHECKOUT_DIRNAME, CLONE_TEMP_PREFIX
from openskills.exceptions import CloneError

logger = logging.getLogger(__name__)


def run_git_clone(url: str, destination: Path) -> None:
    """Run ``git clone --depth 1`` of *url* into *destination*."""
    cmd = ["git", "clone", "--depth", "1", "--quiet", url, str(destination)]
    logger.debug("Running %s", " ".join(cmd))
    try:
        subprocess.run(cmd, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as exc:
        raise CloneError(url, (exc.stderr or "").strip()) from exc
    except FileNotFoundError as exc:
        raise CloneError(url, "git executable not found") from exc


@contextmanager
def cloned_repository(url: str) -> Iterator[Path]:
    """Clone *url* into a temporary directory that is removed on exit."""
    with tempfile.TemporaryDirectory(prefix=CLONE_TEMP_PREFIX) as temp_dir:
        checkout = Path(temp_dir) / CLONE_CHECKOUT_DIRNAME
        run_git_clone(url, checkout)
        yield checkout
