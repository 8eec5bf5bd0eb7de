"""Measurement and comparison subsystem for quickbench.

Times candidate callables over many iterations, reduces the samples to
a single nanosecond figure, and ranks the candidates by speed.
"""
