__all__ = (
    "BaseWrapper",
    "Field",
)


from abc import abstractmethod
from typing import Optional

from pydantic import BaseModel
from pydantic import Field

from ..utils.runhelper import ProcessRunner, RunResult


class BaseWrapper(BaseModel, validate_assignment=True, extra="forbid"):
    @abstractmethod
    def get_cmd(self) -> list[str]:
        pass

    def run_cmd(self, runner: ProcessRunner, capture=False, cwd: Optional[str]=None) -> RunResult:
        cmd = self.get_cmd()
        return runner.run(cmd[0], cmd[1:], capture=capture, cwd=cwd)
