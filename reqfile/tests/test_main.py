import logging

import pytest

from main import main


@pytest.fixture()
def request_file(tmp_path):
    path = tmp_path / "request.http"
    path.write_bytes(b"POST http://api.test:9090/submit\n"
                     b"Content-Type: text/plain\n"
                     b"\n"
                     b"hello")
    return path


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger("reqfile")
    handlers, level = logger.handlers[:], logger.level
    yield
    logger.handlers, logger.level = handlers, level


def test_summary(request_file, capsys):
    assert main([str(request_file)]) == 0
    out = capsys.readouterr().out
    assert "Method:     POST" in out
    assert "Target:     /submit" in out
    assert "Version:    HTTP/1.1" in out
    assert "Connection: api.test:9090" in out
    assert "    Host: api.test" in out
    assert "Body:       5 bytes" in out


def test_raw_format(request_file, capsysbinary):
    assert main([str(request_file), "--format", "raw"]) == 0
    assert capsysbinary.readouterr().out == (
        b"POST /submit HTTP/1.1\r\n"
        b"Content-Type: text/plain\r\n"
        b"Host: api.test\r\n\r\n"
        b"hello"
    )


def test_parse_error_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.http"
    path.write_bytes(b"GET https://secure.example.com/ HTTP/1.1\n\n")
    assert main([str(path)]) == 3
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unsupported scheme: https" in captured.err


def test_missing_file_exit_code(tmp_path, capsys):
    assert main([str(tmp_path / "missing.http")]) == 3
    assert "Cannot open" in capsys.readouterr().err


def test_missing_argument():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_log_file(request_file, tmp_path):
    log_path = tmp_path / "reqfile.log"
    assert main([str(request_file), "--log-file", str(log_path)]) == 0
    logging.getLogger("reqfile").handlers[-1].flush()
    assert "Parsing request from" in log_path.read_text()
