"""
Core of the extended complex library.

Contains the complex value hierarchy with Infinity and NaN, the elementary
function suite, modular reduction, the CMath facade and the cubic equation
solver. No external systems, no I/O.
"""
