"""3D cellular-automaton simulation core, trajectory analysis and rule-space search."""
