"""Infrastructure: working-directory access for the ``cd`` and ``pwd`` builtins.

Rules
-----
* ``~`` and ``~/...`` are expanded to the home directory; nothing else
  (no environment variables).
* No user-facing output; failures are raised as
  :class:`~minish.exceptions.BuiltinError`.
"""

from __future__ import annotations

import os
from pathlib import Path

from minish.exceptions import BuiltinError


class OsNavigator:
    """Concrete :class:`~minish.core.protocols.Navigator` backed by :func:`os.chdir`."""

    def current(self) -> Path:
        try:
            return Path.cwd()
        except OSError as exc:
            raise BuiltinError(
                f"pwd: {exc.strerror or exc}",
                hint="The working directory may have been removed; `cd` somewhere else.",
            ) from exc

    def change(self, target: str | None) -> Path:
        """Change the process working directory to *target*."""
        try:
            if target is None:
                destination = Path.home()
            elif target == "~" or target.startswith("~/"):
                destination = Path(target).expanduser()
            else:
                destination = Path(target)
        except RuntimeError as exc:
            raise BuiltinError(f"cd: {exc}") from exc

        shown = target if target is not None else str(destination)

        try:
            os.chdir(destination)
        except FileNotFoundError as exc:
            raise BuiltinError(f"cd: {shown}: No such file or directory") from exc
        except NotADirectoryError as exc:
            raise BuiltinError(f"cd: {shown}: Not a directory") from exc
        except PermissionError as exc:
            raise BuiltinError(f"cd: {shown}: Permission denied") from exc
        except OSError as exc:
            raise BuiltinError(f"cd: {shown}: {exc.strerror or exc}") from exc
        except ValueError as exc:
            raise BuiltinError(f"cd: {shown}: {exc}") from exc

        return self.current()
