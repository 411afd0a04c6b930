"""Input sources for an ffmpeg audio stream."""

import abc
import subprocess
from typing import IO, Any, List, Optional


class Source(abc.ABC):
    """Where an ffmpeg stream reads its media from."""

    @abc.abstractmethod
    def arguments(self) -> List[str]:
        """Return the ffmpeg input arguments, including ``-i``."""

    @abc.abstractmethod
    def start(self) -> Optional[Any]:
        """Prepare the source and return what ffmpeg should read as stdin."""

    @abc.abstractmethod
    def done(self) -> None:
        """Release the source once the stream has finished."""


class FileSource(Source):
    """A media file on disk."""

    def __init__(self, filename: str) -> None:
        self.filename = filename

    def arguments(self) -> List[str]:
        return ["-i", self.filename]

    def start(self) -> None:
        return None

    def done(self) -> None:
        pass


class ReaderSource(Source):
    """A readable file object piped into ffmpeg; it is closed when done."""

    def __init__(self, reader: IO[bytes]) -> None:
        self.reader = reader

    def arguments(self) -> List[str]:
        return ["-i", "-"]

    def start(self) -> IO[bytes]:
        return self.reader

    def done(self) -> None:
        self.reader.close()


class ExecSource(Source):
    """The output of a command, piped into ffmpeg."""

    def __init__(self, name: str, *args: str) -> None:
        self.name = name
        self.args = list(args)
        self.process: Optional[subprocess.Popen] = None

    def arguments(self) -> List[str]:
        return ["-i", "-"]

    def start(self) -> IO[bytes]:
        """Start the command and return its standard output.

        Raises OSError if the command cannot be started.
        """
        self.process = subprocess.Popen([self.name, *self.args], stdout=subprocess.PIPE)
        return self.process.stdout

    def done(self) -> None:
        if self.process is None:
            return
        self.process.kill()
        self.process.wait()
        if self.process.stdout is not None:
            self.process.stdout.close()