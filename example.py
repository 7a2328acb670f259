#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import Grid, PatternLibrary, Simulation


def main():
    """Send a glider across a small board and print every generation."""
    grid = Grid(20, 12)
    PatternLibrary().get_pattern("Glider").apply_to_grid(grid, offset_x=2, offset_y=2)

    print("Generation 0")
    grid.print()

    def show(sim):
        print(f"\nGeneration {sim.generation} ({sim.population} alive)")
        sim.grid.print()

    result = Simulation(grid).run(8, on_step=show)
    print(f"\nStopped at generation {result.generation}: {result.outcome.value}")


if __name__ == "__main__":
    main()
