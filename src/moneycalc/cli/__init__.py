"""
Command Line Interface Package

Console front end for the money calculator.

Command Structure:
- moneycalc: Main entry point with utility commands (version, config)
- moneycalc menu: Interactive calculator loop

Menu Features:
- Prompts for rubles, kopeks, currency, transaction id and description
- Re-prompts on invalid numbers
- Transfer cost with commission, add, subtract, multiply, divide
- Rejected operations are reported and the session continues
"""
