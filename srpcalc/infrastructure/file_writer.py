"""File Result Writer — persists integer results as decimal text files.

Invariants:
    - write() fully overwrites the target file with str(result), no trailing newline
    - File handle scoped by `with`: released on normal return and on error
    - All OSError mapped to PersistenceError (core/errors.py); missing file on read → ResultNotFoundError
    - When confine=True, paths resolving outside base_dir are rejected before any IO

Design Decisions:
    - Parent directories are not created: a missing directory is a caller error surfaced as PersistenceError
    - read_result() lives beside write(): same path resolution, same encoding, round-trips exactly
"""

import logging
import os
from pathlib import Path

from srpcalc.core.domain_types import Result, ResultPath
from srpcalc.core.errors import (
    ErrorContext, InvalidArgumentError, PersistenceError, ResultNotFoundError,
)

logger = logging.getLogger(__name__)


class FileResultWriter:
    """ResultWriter backed by the local filesystem."""

    def __init__(
        self,
        base_dir: ResultPath | None = None,
        confine: bool = False,
        encoding: str = "utf-8",
    ):
        if confine and base_dir is None:
            raise ValueError("confine=True requires a base_dir")
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.confine = confine
        self.encoding = encoding

    def resolve(self, path: ResultPath) -> Path:
        """Resolve a caller path against base_dir, enforcing confinement."""
        if not isinstance(path, (str, os.PathLike)):
            raise InvalidArgumentError(
                f"Path must be a string or path-like, got {type(path).__name__}",
                "path",
            )
        raw = os.fspath(path)
        if isinstance(raw, bytes) or not raw.strip():
            raise InvalidArgumentError("Path cannot be empty", "path")
        if "\x00" in raw:
            raise InvalidArgumentError("Path contains a NUL byte", "path")

        target = Path(raw)
        if self.base_dir is not None and not target.is_absolute():
            target = self.base_dir / target
        if not self.confine:
            return target

        base = self.base_dir.resolve()
        resolved = target.resolve()
        if resolved == base or not resolved.is_relative_to(base):
            raise InvalidArgumentError(
                "Path must point to a file inside the output directory", "path",
                ErrorContext(path=raw),
            )
        return resolved

    def write(self, result: Result, path: ResultPath) -> Path:
        """Overwrite the file at path with the decimal text of result."""
        if isinstance(result, bool) or not isinstance(result, int):
            raise InvalidArgumentError(
                f"Result must be an integer, got {type(result).__name__}",
                "result",
            )
        target = self.resolve(path)
        try:
            text = str(result)
        except ValueError as e:
            # int → str conversion limit (sys.set_int_max_str_digits)
            raise InvalidArgumentError(str(e), "result") from e

        try:
            with open(target, "w", encoding=self.encoding) as f:
                f.write(text)
        except OSError as e:
            logger.error(
                f"Result write failed: {e}",
                extra={"path": str(target), "error_code": "PERSISTENCE_ERROR"},
            )
            raise PersistenceError(e.strerror or str(e), "write", str(target)) from e

        logger.info(
            "Result written", extra={"path": str(target), "result": result},
        )
        return target

    def read_result(self, path: ResultPath) -> Result:
        """Read back a result persisted by write()."""
        target = self.resolve(path)
        try:
            with open(target, "r", encoding=self.encoding) as f:
                text = f.read()
        except FileNotFoundError:
            raise ResultNotFoundError(str(target)) from None
        except OSError as e:
            logger.error(
                f"Result read failed: {e}",
                extra={"path": str(target), "error_code": "PERSISTENCE_ERROR"},
            )
            raise PersistenceError(e.strerror or str(e), "read", str(target)) from e

        try:
            return Result(int(text.strip()))
        except ValueError:
            raise PersistenceError(
                "stored content is not an integer", "read", str(target),
            ) from None
