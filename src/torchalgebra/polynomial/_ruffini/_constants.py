# |remainder| below which a candidate is accepted as a root
ROOT_TOLERANCE = 1e-9

# Largest denominator used when rendering values as fractions
MAX_DENOMINATOR = 10000
