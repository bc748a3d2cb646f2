"""Greatest and least of the three primary channels.

Ties resolve in red, green, blue order. NaN makes every comparison false, so a
NaN-bearing triple falls through to the blue branch.
"""

def max_channel(r: float, g: float, b: float) -> float:
    if r >= b and r >= g:
        return r
    elif g >= r and g >= b:
        return g
    else:
        return b

def min_channel(r: float, g: float, b: float) -> float:
    if r <= b and r <= g:
        return r
    elif g <= r and g <= b:
        return g
    else:
        return b
