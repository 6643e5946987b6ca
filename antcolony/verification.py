"""Verification-hash lookup with a rotating validation log."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

UNKNOWN_HASH = "UNKNOWN"
DEFAULT_LOG_FILENAME = "validation_history_log.txt"
DEFAULT_MAX_LOG_SIZE_BYTES = 5 * 1024 * 1024
DEFAULT_MAX_BACKUP_FILES = 5
DEFAULT_VERIFICATION_FILE = "verification.txt"


class ValidationLogger:
    """Appends validation events to a log file, rotating it when it grows too large."""

    def __init__(
        self,
        log_filename: str | os.PathLike[str] = DEFAULT_LOG_FILENAME,
        max_log_size_bytes: int = DEFAULT_MAX_LOG_SIZE_BYTES,
        max_backup_files: int = DEFAULT_MAX_BACKUP_FILES,
    ) -> None:
        self.log_path = Path(log_filename)
        self.max_log_size_bytes = max_log_size_bytes
        self.max_backup_files = max_backup_files

    def _backup(self, number: int) -> Path:
        return self.log_path.with_name(f"{self.log_path.name}.{number}")

    def rotate_if_needed(self) -> None:
        """Move the log to ``.1`` (shifting older backups up) once it exceeds the size limit."""
        try:
            size = self.log_path.stat().st_size
        except FileNotFoundError:
            return
        if size <= self.max_log_size_bytes:
            return

        backups = sorted(
            (n for n in range(1, self.max_backup_files + 1) if self._backup(n).exists()),
            reverse=True,
        )
        if backups and len(backups) >= self.max_backup_files:
            self._backup(backups[0]).unlink()
            backups = backups[1:]
        for number in backups:
            os.replace(self._backup(number), self._backup(number + 1))
        os.replace(self.log_path, self._backup(1))

    def log_validation(self, filename: str, hash_value: str, is_valid: bool) -> None:
        """Append one timestamped validation record."""
        self.rotate_if_needed()
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        status = "VALID" if is_valid else "INVALID"
        line = f"{timestamp} | File: {filename} | Hash: {hash_value} | Status: {status}\n"
        try:
            with self.log_path.open("a", encoding="utf-8") as log_file:
                log_file.write(line)
        except OSError:
            print(f"Error: Could not open log file: {self.log_path}", file=sys.stderr)


class Verification:
    """Reads the stored verification hash and records integrity checks."""

    def __init__(
        self,
        verification_file: str | os.PathLike[str] = DEFAULT_VERIFICATION_FILE,
        logger: ValidationLogger | None = None,
    ) -> None:
        self.verification_file = Path(verification_file)
        self.logger = logger if logger is not None else ValidationLogger()

    def stored_verification_hash(self) -> str:
        """Return the first token of the verification file, or ``UNKNOWN`` if it is missing."""
        try:
            text = self.verification_file.read_text(encoding="utf-8")
        except OSError:
            print(
                "Warning: verification.txt missing! Commit required to update hash.",
                file=sys.stderr,
            )
            hash_value, is_valid = UNKNOWN_HASH, False
        else:
            tokens = text.split()
            hash_value, is_valid = (tokens[0] if tokens else ""), True

        self.logger.log_validation(str(self.verification_file), hash_value, is_valid)
        return hash_value

    def verify_application_integrity(self) -> bool:
        """Return True when a stored hash is present."""
        hash_value = self.stored_verification_hash()
        is_valid = hash_value != UNKNOWN_HASH
        self.logger.log_validation("Application Integrity", hash_value, is_valid)
        return is_valid