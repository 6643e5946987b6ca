import re

import pytest

from antcolony.verification import UNKNOWN_HASH, ValidationLogger, Verification

LINE = re.compile(
    r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \| File: (.*) \| Hash: (.*) \| Status: (VALID|INVALID)$"
)


@pytest.fixture
def logger(tmp_path):
    return ValidationLogger(tmp_path / "log.txt")


def read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def test_log_validation_format(logger):
    logger.log_validation("data.txt", "abc123", True)
    logger.log_validation("other.txt", "def456", False)
    lines = read_lines(logger.log_path)
    assert len(lines) == 2
    first, second = (LINE.match(line) for line in lines)
    assert first.groups() == ("data.txt", "abc123", "VALID")
    assert second.groups() == ("other.txt", "def456", "INVALID")


def test_missing_verification_file_gives_unknown(tmp_path, logger, capsys):
    verifier = Verification(tmp_path / "verification.txt", logger)
    assert verifier.stored_verification_hash() == UNKNOWN_HASH
    assert "verification.txt missing" in capsys.readouterr().err
    (match,) = (LINE.match(line) for line in read_lines(logger.log_path))
    assert match.group(2) == UNKNOWN_HASH
    assert match.group(3) == "INVALID"


def test_stored_hash_reads_first_token(tmp_path, logger):
    path = tmp_path / "verification.txt"
    path.write_text("  abc123 trailing\n", encoding="utf-8")
    verifier = Verification(path, logger)
    assert verifier.stored_verification_hash() == "abc123"


def test_verify_integrity_succeeds_and_logs_twice(tmp_path, logger):
    path = tmp_path / "verification.txt"
    path.write_text("abc123\n", encoding="utf-8")
    verifier = Verification(path, logger)
    assert verifier.verify_application_integrity() is True
    matches = [LINE.match(line) for line in read_lines(logger.log_path)]
    assert [m.group(1) for m in matches] == [str(path), "Application Integrity"]
    assert all(m.group(3) == "VALID" for m in matches)


def test_verify_integrity_fails_without_file(tmp_path, logger):
    verifier = Verification(tmp_path / "missing.txt", logger)
    assert verifier.verify_application_integrity() is False
    last = LINE.match(read_lines(logger.log_path)[-1])
    assert last.groups() == ("Application Integrity", UNKNOWN_HASH, "INVALID")


def test_no_rotation_below_limit(tmp_path):
    logger = ValidationLogger(tmp_path / "log.txt", 10_000, 2)
    logger.log_validation("a", "h", True)
    logger.log_validation("b", "h", True)
    assert not (tmp_path / "log.txt.1").exists()
    assert len(read_lines(logger.log_path)) == 2


def test_rotation_moves_large_log_to_backup(tmp_path):
    log = tmp_path / "log.txt"
    log.write_text("x" * 20, encoding="utf-8")
    logger = ValidationLogger(log, 10, 2)
    logger.log_validation("a", "h", True)
    assert (tmp_path / "log.txt.1").read_text(encoding="utf-8") == "x" * 20
    assert len(read_lines(log)) == 1


def test_rotation_keeps_at_most_max_backups(tmp_path):
    log = tmp_path / "log.txt"
    log.write_text("first" * 10, encoding="utf-8")
    logger = ValidationLogger(log, 10, 2)
    for name in ("a", "b", "c"):
        logger.log_validation(name, "h", True)
    assert not (tmp_path / "log.txt.3").exists()
    newest_backup = LINE.match(read_lines(tmp_path / "log.txt.1")[0])
    older_backup = LINE.match(read_lines(tmp_path / "log.txt.2")[0])
    current = LINE.match(read_lines(log)[0])
    assert (older_backup.group(1), newest_backup.group(1), current.group(1)) == ("a", "b", "c")


def test_unwritable_log_reports_error(tmp_path, capsys):
    logger = ValidationLogger(tmp_path / "no_such_dir" / "log.txt")
    logger.log_validation("a", "h", True)
    assert "Could not open log file" in capsys.readouterr().err
    assert not logger.log_path.exists()