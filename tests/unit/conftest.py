import pytest

from idfdocker.context import DispatchContext
from idfdocker.utils.runhelper import ProcessRunner, RunResult


class FakeRunner(ProcessRunner):
    """Records every call, answers docker version with a server version."""

    def __init__(self, server_version="27.3.1\n", returncodes=None):
        self.calls = []
        self.server_version = server_version
        self.returncodes = returncodes or {}

    def run(self, program, args, capture=False, cwd=None):
        self.calls.append([program, *args])
        if args[:1] == ["version"]:
            return RunResult(self.server_version, "", 0)
        if args[:2] == ["context", "show"]:
            return RunResult("default\n", "", 0)
        returncode = self.returncodes.get(program, 0)
        if capture:
            return RunResult("", "", returncode)
        return RunResult(None, None, returncode)

    def executed(self):
        """Calls other than the docker version/context probes."""
        return [c for c in self.calls if c[1:2] not in (["version"], ["context"])]


class FakePrompt:
    def __init__(self, answer="from-prompt"):
        self.answer = answer
        self.questions = []

    def __call__(self, text):
        self.questions.append(text)
        return self.answer


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def prompt():
    return FakePrompt()


@pytest.fixture
def ctx(runner, prompt, tmp_path):
    return DispatchContext(runner=runner, prompt=prompt, cwd=str(tmp_path))
