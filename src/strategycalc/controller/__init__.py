"""
The CONTROLLER layer mutates the CalculatorState: slot/day structure,
Y synchronization, value generation and summation.
"""
