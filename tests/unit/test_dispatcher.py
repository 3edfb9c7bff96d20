import pytest

from idfdocker.commands import COMMANDS, Command
from idfdocker.dispatcher import dispatch

COMPOSE_RUN = ["docker", "compose", "run", "--rm", "esp-idf"]
ENDPOINT = "rfc2217://host.docker.internal:4000?ign_set_control"


@pytest.mark.parametrize(
    'name, argument, expected',
    [
        ('set-target', 'esp32s3', COMPOSE_RUN + ['idf.py', 'set-target', 'esp32s3']),
        ('menuconfig', None, COMPOSE_RUN + ['idf.py', 'menuconfig']),
        ('build', None, COMPOSE_RUN + ['idf.py', 'build']),
        ('bash', None, COMPOSE_RUN + ['bash']),
        ('flash', None, COMPOSE_RUN + ['idf.py', 'flash', '--port', ENDPOINT]),
        ('monitor', None, COMPOSE_RUN + ['idf.py', 'monitor', '--port', ENDPOINT]),
    ],
)
def test_dispatch_runs_one_external_command(ctx, runner, name, argument, expected):
    assert dispatch(name, argument, ctx) == 0
    assert runner.executed() == [expected]


def test_dispatch_probes_before_running(ctx, runner):
    dispatch('build', None, ctx)
    assert runner.calls[0] == ['docker', 'version', '--format', '{{.Server.Version}}']
    assert runner.calls[1][-1] == 'build'


def test_every_command_is_registered():
    assert set(COMMANDS) == set(Command)


@pytest.mark.parametrize('name', ['flash-all', 'BUILD', '', 'create_project'])
def test_dispatch_unknown_prints_help(ctx, runner, capsys, name):
    assert dispatch(name, None, ctx) == 1
    assert runner.calls == []

    captured = capsys.readouterr()
    assert f'WARNING: Unknown command: {name}' in captured.out
    assert 'Usage: idf-docker' in captured.out


def test_dispatch_help_skips_probe(ctx, runner, capsys):
    assert dispatch('help', None, ctx) == 0
    assert runner.calls == []

    captured = capsys.readouterr()
    for command in Command:
        assert command.value in captured.out


@pytest.mark.parametrize('name', [c.value for c in Command if c is not Command.HELP])
def test_dispatch_stops_without_docker(ctx, runner, prompt, capsys, name):
    runner.server_version = ""
    assert dispatch(name, "arg", ctx) == 1
    assert runner.executed() == []

    captured = capsys.readouterr()
    assert 'ERROR: Docker is not available' in captured.out


def test_dispatch_prompts_once_for_target(ctx, runner, prompt):
    dispatch('set-target', None, ctx)
    assert len(prompt.questions) == 1
    assert 'target' in prompt.questions[0]
    assert runner.executed() == [COMPOSE_RUN + ['idf.py', 'set-target', 'from-prompt']]


def test_dispatch_passes_empty_answer(ctx, runner, prompt):
    prompt.answer = ""
    dispatch('set-target', None, ctx)
    assert runner.executed() == [COMPOSE_RUN + ['idf.py', 'set-target', '']]


def test_dispatch_no_prompt_when_argument_given(ctx, prompt):
    dispatch('set-target', 'esp32c3', ctx)
    assert prompt.questions == []


def test_dispatch_no_prompt_for_build(ctx, prompt):
    dispatch('build', None, ctx)
    assert prompt.questions == []


def test_dispatch_returns_toolchain_status(ctx, runner):
    runner.returncodes = {'docker': 2}
    assert dispatch('build', None, ctx) == 2


def test_flash_endpoint_ignores_bridge_device(ctx, runner, tmp_path):
    (tmp_path / 'esp_rfc2217_server').mkdir()
    dispatch('esp_rfc2217_server', '/dev/ttyACM7', ctx)
    dispatch('flash', None, ctx)
    assert runner.executed()[-1] == COMPOSE_RUN + ['idf.py', 'flash', '--port', ENDPOINT]
