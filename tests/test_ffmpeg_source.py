import io
import sys

import pytest

from gumble.ffmpeg_source import ExecSource, FileSource, ReaderSource, Source


def test_file_source_arguments_and_start():
    source = FileSource("song.ogg")
    assert source.arguments() == ["-i", "song.ogg"]
    assert source.start() is None


def test_reader_source_passes_reader_and_closes_it():
    reader = io.BytesIO(b"audio")
    source = ReaderSource(reader)
    assert source.arguments() == ["-i", "-"]
    assert source.start() is reader
    source.done()
    assert reader.closed is True


def test_exec_source_pipes_command_output():
    source = ExecSource(sys.executable, "-c", "import sys; sys.stdout.write('hi')")
    assert source.arguments() == ["-i", "-"]
    pipe = source.start()
    try:
        assert pipe.read() == b"hi"
    finally:
        source.done()


def test_exec_source_done_stops_running_command():
    source = ExecSource(sys.executable, "-c", "import time; time.sleep(30)")
    source.start()
    source.done()
    assert source.process.returncode != 0
    assert source.process.stdout.closed is True


def test_exec_source_missing_command_raises():
    source = ExecSource("gumble-command-that-does-not-exist")
    with pytest.raises(OSError):
        source.start()


def test_source_is_abstract():
    with pytest.raises(TypeError):
        Source()