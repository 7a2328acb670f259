"""Tests for the Simulation driver."""

from lifegrid.core.grid import Grid
from lifegrid.core.game import Cycle, Outcome, RunResult, Simulation

BLOCK = [(2, 2), (3, 2), (2, 3), (3, 3)]
VERTICAL_BLINKER = [(5, 4), (5, 5), (5, 6)]


def seeded(cols, rows, cells):
    grid = Grid(cols, rows)
    for col, row in cells:
        grid.insert(col, row)
    return grid


class TestStep:
    """Stepping and cycle detection."""

    def test_new_simulation(self):
        """A fresh simulation sits at generation 0 with no cycle."""
        grid = Grid(10, 10)
        simulation = Simulation(grid)

        assert simulation.grid is grid
        assert simulation.generation == 0
        assert simulation.population == 0
        assert simulation.cycle is None

    def test_step_ticks_the_grid(self):
        """Each step advances the board and the generation counter."""
        grid = seeded(10, 10, VERTICAL_BLINKER)
        simulation = Simulation(grid)

        simulation.step()

        assert simulation.generation == 1
        assert [(4, 5), (5, 5), (6, 5)] == list(grid.live_cells())

    def test_block_repeats_immediately(self):
        """A still life is a cycle of period 1 starting at generation 0."""
        simulation = Simulation(seeded(6, 6, BLOCK))

        assert simulation.step() == Cycle(start=0, period=1)
        assert simulation.generation == 1

    def test_blinker_period(self):
        """The blinker is found to repeat on its second step."""
        simulation = Simulation(seeded(10, 10, VERTICAL_BLINKER))

        assert simulation.step() is None
        assert simulation.step() == Cycle(start=0, period=2)

    def test_cycle_is_kept_once_found(self):
        """Further steps keep reporting the first detected cycle."""
        simulation = Simulation(seeded(10, 10, VERTICAL_BLINKER))
        for _ in range(5):
            simulation.step()

        assert simulation.cycle == Cycle(start=0, period=2)

    def test_cells_inserted_after_creation_are_tracked(self):
        """Edits made between creating the simulation and stepping count."""
        grid = Grid(8, 8)
        simulation = Simulation(grid)
        for col in (1, 2, 3):
            grid.insert(col, 2)

        simulation.step()
        simulation.step()

        assert simulation.cycle == Cycle(start=0, period=2)

    def test_memory_limit(self):
        """Only the most recent states are remembered."""
        # A glider never repeats exactly while it has room to travel
        grid = seeded(40, 40, [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)])
        simulation = Simulation(grid, memory=10)

        for _ in range(60):
            simulation.step()

        assert simulation.cycle is None
        assert len(simulation._first_seen) == 10
        assert len(simulation._order) == 10

    def test_forgotten_states_are_not_matched(self):
        """With a memory of one state, a period-2 blinker goes unnoticed."""
        simulation = Simulation(seeded(10, 10, VERTICAL_BLINKER), memory=1)

        for _ in range(6):
            simulation.step()

        assert simulation.cycle is None

    def test_forget(self):
        """forget() drops the cycle but keeps the generation count."""
        simulation = Simulation(seeded(6, 6, BLOCK))
        simulation.step()

        simulation.forget()

        assert simulation.cycle is None
        assert simulation.generation == 1
        assert simulation.step() == Cycle(start=1, period=1)

    def test_restart(self):
        """restart() rewinds to generation 0, clearing the grid unless asked not to."""
        grid = seeded(6, 6, BLOCK)
        simulation = Simulation(grid)
        simulation.step()

        simulation.restart(clear=False)
        assert simulation.generation == 0
        assert simulation.cycle is None
        assert grid.population == 4

        simulation.restart()
        assert grid.population == 0


class TestRun:
    """Running to a stopping condition."""

    def test_lone_cell_dies(self):
        """A single cell is extinct after one generation."""
        result = Simulation(seeded(10, 10, [(5, 5)])).run(100)

        assert result == RunResult(generation=1, outcome=Outcome.EXTINCT, initial_population=1, population=0)

    def test_empty_board_is_extinct_not_cyclic(self):
        """Extinction wins over the trivial repeat of an empty board."""
        result = Simulation(Grid(0, 0)).run(10)

        assert result.outcome is Outcome.EXTINCT
        assert result.generation == 1

    def test_blinker_stops_on_cycle(self):
        """The run ends as soon as the blinker repeats."""
        result = Simulation(seeded(10, 10, VERTICAL_BLINKER)).run(100)

        assert result.outcome is Outcome.CYCLE
        assert result.generation == 2
        assert result.cycle == Cycle(start=0, period=2)
        assert result.bounding_box == (5, 4, 5, 6)

    def test_limit(self):
        """A long-lived pattern runs into the generation limit."""
        r_pentomino = [(14, 13), (15, 13), (13, 14), (14, 14), (14, 15)]
        result = Simulation(seeded(30, 30, r_pentomino)).run(10)

        assert result.outcome is Outcome.LIMIT
        assert result.generation == 10
        assert result.initial_population == 5
        assert result.cycle is None

    def test_on_step_sees_every_generation(self):
        """The callback is invoked after each step, including the last."""
        seen = []
        simulation = Simulation(seeded(10, 10, VERTICAL_BLINKER))

        result = simulation.run(100, on_step=lambda sim: seen.append((sim.generation, sim.population)))

        assert seen == [(1, 3), (2, 3)]
        assert result.generation == 2

    def test_on_step_before_extinction(self):
        """The callback also sees the generation where the board empties."""
        seen = []

        Simulation(seeded(4, 4, [(1, 1)])).run(5, on_step=lambda sim: seen.append(sim.population))

        assert seen == [0]

    def test_outcome_values(self):
        """Outcomes compare equal to their string names."""
        assert Outcome.EXTINCT == "extinct"
        assert Outcome("cycle") is Outcome.CYCLE
