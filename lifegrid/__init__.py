"""Life-like cellular automaton on a wrapping grid, with editable rules, a shape stamp editor and a Tkinter front end."""

__version__ = "0.1.0"