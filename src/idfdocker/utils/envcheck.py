from ..config import NO_PROBE_OUTPUT, SERVER_VERSION_FORMAT
from ..utils.loggerutils import note
from ..utils.runhelper import ProcessRunner
from ..verifiers.settingsschema import SettingsSchema
from ..wrappers import DockerContextWrapper, DockerVersionWrapper


def check_environment(settings: SettingsSchema, runner: ProcessRunner, verbose=False) -> bool:
    """Probe whether the container runtime server answers.

    Prints diagnostics and returns False when it does not.
    """
    probe = DockerVersionWrapper(container_cli=settings.container_cli, format=SERVER_VERSION_FORMAT)
    try:
        result = probe.run_cmd(runner, capture=True)
    except OSError as err:
        report_unavailable(settings, runner, str(err))
        return False

    version = (result.stdout or '').strip()
    if result.returncode == 0 and version:
        if verbose:
            note(f'Docker server version: {version}')
        return True

    details = (result.stderr or '').strip() or version or NO_PROBE_OUTPUT
    report_unavailable(settings, runner, details)
    return False


def report_unavailable(settings, runner, details):
    print("ERROR: Docker is not available")
    print(details)

    # best effort, the probe already failed
    try:
        result = DockerContextWrapper(container_cli=settings.container_cli).run_cmd(runner, capture=True)
    except OSError:
        return
    context = (result.stdout or '').strip()
    if result.returncode == 0 and context:
        print(f"Active docker context: {context}")
