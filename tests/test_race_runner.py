import copy
import io

import pytest

from podracer.evolution.engine import GeneticPlanner, PlannerConfig
from podracer.exceptions import PodRacerError
from podracer.geometry.vector import Vector
from podracer.protocol.reader import RaceHeader
from podracer.runner import RaceRunner, TimingConfig

HEADER = RaceHeader(laps=3, checkpoints=[Vector(8000, 4500), Vector(2000, 6000)])


def pods(telemetry, lead_angle=-1, wingman_angle=-1):
    return [
        telemetry(x=0, y=0, angle=lead_angle),
        telemetry(x=1000, y=2000, angle=wingman_angle),
        telemetry(x=-1000, y=0, angle=-1),
        telemetry(x=-2000, y=0, angle=-1),
    ]


@pytest.fixture
def runner(stepping_clock):
    planner = GeneticPlanner(PlannerConfig(seed=3))
    runner = RaceRunner(planner, TimingConfig(), clock=stepping_clock(0.01))
    runner.start(HEADER)
    return runner


def test_first_turn_heads_for_second_checkpoint(runner, telemetry):
    commands = runner.play_turn(pods(telemetry, wingman_angle=0), turn_start=0.0)

    assert commands[0] == "2000 6000 100"
    assert commands[1] == "5000 2000 0"
    assert runner.game.turn == 1


def test_later_turns_render_the_planned_move(runner, telemetry):
    runner.play_turn(pods(telemetry), turn_start=0.0)

    commands = runner.play_turn(pods(telemetry, lead_angle=30, wingman_angle=90), turn_start=0.0)

    x, y, token = commands[0].split()
    assert x.lstrip("-").isdigit() and y.lstrip("-").isdigit()
    assert token == "BOOST" or 0 <= int(token) <= 100
    assert commands[1] == "1000 6000 0"
    assert runner.game.turn == 2


def test_lead_command_renders_best_plan_then_rolls_forward(runner, telemetry, monkeypatch):
    runner.play_turn(pods(telemetry), turn_start=0.0)
    seen = {}
    search = runner.planner.search

    def recording_search(game, deadline, clock):
        best = search(game, deadline, clock)
        seen["instruction"] = best.first.decode()
        seen["lead"] = copy.copy(game.state.lead_pod)
        seen["plan"] = list(best)
        return best

    monkeypatch.setattr(runner.planner, "search", recording_search)

    commands = runner.play_turn(pods(telemetry, lead_angle=30), turn_start=runner.clock())

    assert runner.planner.metrics.last_turn_generations > 0
    assert commands[0] == seen["lead"].render(seen["instruction"])
    assert list(runner.planner.best)[:-1] == seen["plan"][1:]


def test_first_turn_gets_the_larger_budget(runner, telemetry):
    runner.play_turn(pods(telemetry), turn_start=0.0)
    first = runner.planner.metrics.last_turn_generations

    runner.play_turn(pods(telemetry), turn_start=runner.clock())
    second = runner.planner.metrics.last_turn_generations

    assert first > second > 0


def test_turn_rolls_the_population_forward(runner, telemetry):
    runner.play_turn(pods(telemetry), turn_start=0.0)

    assert runner.planner.metrics.turns == 1
    assert len(runner.planner.genomes) == 8
    assert all(len(genome) == 6 for genome in runner.planner.genomes)


def test_wingman_never_boosts(runner, telemetry):
    for _ in range(3):
        commands = runner.play_turn(pods(telemetry, wingman_angle=0), turn_start=0.0)
        assert commands[1].endswith(" 0")
    assert runner.game.state.pods[1].boost_count == 1


def test_play_turn_requires_start():
    runner = RaceRunner(GeneticPlanner(PlannerConfig(seed=0)))

    with pytest.raises(PodRacerError):
        runner.play_turn([])


def test_run_plays_until_input_closes(stepping_clock):
    turn = "0 0 0 0 -1 0\n1000 2000 0 0 0 0\n-1000 0 0 0 -1 0\n-2000 0 0 0 -1 0\n"
    stdin = io.StringIO("3\n2\n8000 4500\n2000 6000\n" + turn + turn)
    stdout = io.StringIO()
    runner = RaceRunner(
        GeneticPlanner(PlannerConfig(seed=5)),
        TimingConfig(),
        clock=stepping_clock(0.01),
    )

    turns = runner.run(stdin, stdout)

    lines = stdout.getvalue().splitlines()
    assert turns == 2
    assert len(lines) == 4
    assert lines[0] == "2000 6000 100"
    assert lines[1] == "5000 2000 0"
    assert runner.planner.metrics.turns == 2


def test_timing_budgets():
    timing = TimingConfig()

    assert timing.budget(first_turn=True) == pytest.approx(0.98)
    assert timing.budget(first_turn=False) == pytest.approx(0.07)
