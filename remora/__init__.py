"""Motion-control controller core: data frames, timer-driven threads, I/O modules and the state machine."""

__version__ = "2.0.0"