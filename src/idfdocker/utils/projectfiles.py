import os
import shutil

from ..utils.loggerutils import die


def relocate_project(cwd: str, name: str) -> None:
    """Move the generated project one level up into the working directory."""
    project_dir = os.path.join(cwd, name)
    if not name or os.path.realpath(project_dir) == os.path.realpath(cwd):
        die(f'Refusing to relocate {project_dir!r} onto itself')
    if not os.path.isdir(project_dir):
        die(f'Generated project directory not found: {project_dir}')

    for entry in sorted(os.listdir(project_dir)):
        target = os.path.join(cwd, entry)
        # shutil.move would nest directories into an existing one
        if os.path.lexists(target):
            raise FileExistsError(f'{target} already exists')
        shutil.move(os.path.join(project_dir, entry), target)

    shutil.rmtree(project_dir)
