import sys

import pytest

from carthage_tasks.utils import CommandRunner, CommandRunnerError, ConsoleOutputAppender

from conftest import RecordingLogger


def _python(code):
    return [sys.executable, "-c", code]


def test_output_is_streamed_line_by_line(tmp_path):
    logger = RecordingLogger()
    runner = CommandRunner(logger)

    runner.run(tmp_path, _python("print('one'); print('two')"), {}, ConsoleOutputAppender(logger))

    assert [msg for level, msg in logger.messages if level == "raw"] == ["one", "two"]


def test_environment_is_added_to_current_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("CARTHAGE_TASKS_INHERITED", "kept")
    logger = RecordingLogger()
    runner = CommandRunner(logger)
    code = "import os; print(os.environ['CARTHAGE_TASKS_INHERITED'], os.environ['XCODE_XCCONFIG_FILE'])"

    runner.run(tmp_path, _python(code), {"XCODE_XCCONFIG_FILE": "/tmp/x.xcconfig"}, ConsoleOutputAppender(logger))

    assert ("raw", "kept /tmp/x.xcconfig") in logger.messages


def test_working_directory(tmp_path):
    logger = RecordingLogger()
    runner = CommandRunner(logger)

    runner.run(tmp_path, _python("import os; print(os.getcwd())"), None, ConsoleOutputAppender(logger))

    raw = [msg for level, msg in logger.messages if level == "raw"]
    assert raw == [str(tmp_path.resolve())] or raw == [str(tmp_path)]


def test_nonzero_exit_raises_with_output(tmp_path):
    runner = CommandRunner(RecordingLogger())

    with pytest.raises(CommandRunnerError) as excinfo:
        runner.run(tmp_path, _python("import sys; print('Failed to resolve'); sys.exit(3)"))

    assert excinfo.value.returncode == 3
    assert "Failed to resolve" in excinfo.value.output


def test_missing_executable_raises(tmp_path):
    runner = CommandRunner(RecordingLogger())

    with pytest.raises(CommandRunnerError) as excinfo:
        runner.run(tmp_path, [str(tmp_path / "does-not-exist")])

    assert excinfo.value.returncode is None


def test_dry_run_spawns_nothing(tmp_path):
    logger = RecordingLogger()
    runner = CommandRunner(logger, dry_run=True)
    marker = tmp_path / "marker"

    runner.run(tmp_path, _python(f"open({str(marker)!r}, 'w').close()"))

    assert not marker.exists()
    assert any(level == "info" and msg.startswith("[DRY RUN]") for level, msg in logger.messages)


def test_run_with_result_returns_stripped_stdout():
    runner = CommandRunner(RecordingLogger())

    assert runner.run_with_result(*_python("print('  Xcode 12.0.1  ')")) == "Xcode 12.0.1"


def test_run_with_result_raises_on_failure():
    runner = CommandRunner(RecordingLogger())

    with pytest.raises(CommandRunnerError) as excinfo:
        runner.run_with_result(*_python("import sys; sys.stderr.write('boom'); sys.exit(1)"))

    assert excinfo.value.returncode == 1
    assert excinfo.value.output == "boom"


def test_error_message_names_the_command():
    error = CommandRunnerError(["carthage", "update"], 2)

    assert str(error) == "Command failed with exit code 2: carthage update"


def test_undecodable_output_is_streamed(tmp_path):
    logger = RecordingLogger()
    runner = CommandRunner(logger)
    code = "import sys; sys.stdout.buffer.write(b'Building caf\\xe9\\n')"

    runner.run(tmp_path, _python(code), None, ConsoleOutputAppender(logger))

    assert ("raw", "Building caf�") in logger.messages


def test_undecodable_output_on_failure_still_raises(tmp_path):
    logger = RecordingLogger()
    runner = CommandRunner(logger)
    code = "import sys; sys.stdout.buffer.write(b'Building caf\\xe9\\n'); sys.stdout.flush(); sys.exit(1)"

    with pytest.raises(CommandRunnerError) as excinfo:
        runner.run(tmp_path, _python(code), None, ConsoleOutputAppender(logger))

    assert excinfo.value.returncode == 1
    assert "Building caf�" in excinfo.value.output


def test_run_with_result_tolerates_undecodable_output():
    runner = CommandRunner(RecordingLogger())

    output = runner.run_with_result(*_python("import sys; sys.stdout.buffer.write(b'Xcode caf\\xe9')"))

    assert output == "Xcode caf�"
