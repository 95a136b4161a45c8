"""Information-processing rule: every living cell is a logic gate."""

from __future__ import annotations

import math
from typing import Sequence

from cube_automata.config.constants import MIN_SIGNAL, NUM_COLORS, SIGNAL_HISTORY_SIZE
from cube_automata.config.types import InfoConfig, SourceMode
from cube_automata.domain.cell_state import GateType, InfoCellState, States
from cube_automata.domain.grid import Grid, neighbor_table


def gate_output(inputs: Sequence[float], gate: GateType, threshold: float) -> float:
    """Truth table for every gate except DELAY and SOURCE.

    AND and NOT stay silent without inputs.
    """
    active = sum(1 for value in inputs if value > threshold)
    if gate is GateType.WIRE:
        return max(inputs) if inputs else 0.0
    if gate is GateType.AND:
        return 1.0 if inputs and active == len(inputs) else 0.0
    if gate is GateType.OR:
        return 1.0 if active > 0 else 0.0
    if gate is GateType.XOR:
        return 1.0 if active % 2 == 1 else 0.0
    if gate is GateType.NOT:
        return 1.0 if inputs and active == 0 else 0.0
    if gate is GateType.THRESHOLD:
        return 1.0 if active >= 2 else 0.0
    return 0.0


def source_output(mode: SourceMode, generation: int) -> float:
    if mode is SourceMode.OSCILLATING:
        return 1.0 if math.sin(generation) > 0 else 0.0
    return 1.0


def gate_color(gate: GateType, signal: float) -> int:
    """Gate identity as color, shifted by half the palette while idle."""
    base = int(gate) % NUM_COLORS
    return base if signal > 0.5 else (base + 3) % NUM_COLORS


def collect_inputs(states: States, cells: tuple[int, ...], decay: float) -> tuple[float, ...]:
    inputs: list[float] = []
    for j in cells:
        neighbor = states[j]
        if neighbor.color is None:
            continue
        decayed = getattr(neighbor, "output_signal", 0.0) * (1 - decay)
        if decayed > MIN_SIGNAL:
            inputs.append(decayed)
    return tuple(inputs)


def evolve_info(
    grid: Grid,
    states: States,
    n: int,
    config: InfoConfig,
    *,
    generation: int = 0,
) -> tuple[Grid, States]:
    """Propagate signals one hop and recolor gates by activity.

    SOURCE gates in oscillating mode follow ``sin(generation) > 0``. Cells
    are never born or killed by this rule.
    """
    table = neighbor_table(n)
    new_grid = list(grid)
    new_states: list[InfoCellState] = []
    for i, color in enumerate(grid):
        state = states[i]
        if color is None:
            new_states.append(InfoCellState(color=None))
            continue
        gate = GateType(getattr(state, "gate_type", GateType.WIRE))
        inputs = collect_inputs(states, table[i], config.signal_decay)
        buffer: tuple[float, ...] = ()
        if gate is GateType.DELAY:
            previous = getattr(state, "input_buffer", ())
            signal = previous[0] if previous else 0.0
            buffer = inputs
        elif gate is GateType.SOURCE:
            signal = source_output(config.source_mode, generation)
        else:
            signal = gate_output(inputs, gate, config.signal_threshold)
        history = (getattr(state, "signal_history", ()) + (signal,))[-SIGNAL_HISTORY_SIZE:]
        new_grid[i] = gate_color(gate, signal)
        new_states.append(
            InfoCellState(
                color=new_grid[i],
                gate_type=gate,
                output_signal=signal,
                input_buffer=buffer,
                signal_history=history,
            )
        )
    return tuple(new_grid), tuple(new_states)
