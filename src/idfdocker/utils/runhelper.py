import subprocess
from abc import ABC
from abc import abstractmethod
from typing import NamedTuple, Optional

from ..utils.loggerutils import note


class RunResult(NamedTuple):
    stdout: Optional[str]
    stderr: Optional[str]
    returncode: int


class ProcessRunner(ABC):
    """Starts external programs and waits for them to exit.

    With ``capture`` the output is collected and returned, otherwise the
    child inherits the terminal and ``stdout``/``stderr`` are None.
    """

    @abstractmethod
    def run(self, program: str, args: list[str], capture: bool=False, cwd: Optional[str]=None) -> RunResult:
        pass


class SubprocessRunner(ProcessRunner):
    def __init__(self, verbose: bool=False):
        self.verbose = verbose

    def run(self, program, args, capture=False, cwd=None):
        cmd = [program, *args]
        if self.verbose:
            note(f'Calling {cmd}')
        pipe = subprocess.PIPE if capture else None
        popen = subprocess.Popen(cmd, stdout=pipe, stderr=pipe, cwd=cwd)

        try:
            stdout, stderr = popen.communicate()
        except KeyboardInterrupt:
            popen.wait()
            raise
        if isinstance(stdout, bytes):
            stdout = stdout.decode(errors='backslashreplace')
        if isinstance(stderr, bytes):
            stderr = stderr.decode(errors='backslashreplace')
        return RunResult(stdout, stderr, popen.returncode)
