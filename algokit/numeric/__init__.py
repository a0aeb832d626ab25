"""Numeric routines: roots, number theory, calculus, conversions, statistics and volumes."""