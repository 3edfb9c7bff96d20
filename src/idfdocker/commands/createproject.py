from . import Command, register
from ..utils.loggerutils import note
from ..utils.projectfiles import relocate_project


@register(Command.CREATE_PROJECT)
class CreateProjectCommand:
    def run(self, name, ctx):
        result = ctx.toolchain("create-project", name)
        if result.returncode:
            return result.returncode

        # idf.py creates <name>/, the working directory is the project
        relocate_project(ctx.cwd, name)
        note(f"Created project {name} in {ctx.cwd}")
        return 0
