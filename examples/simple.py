"""
Very simple example (seq-Phragmen with exact fractions)
"""

from seqphragmen.ballots import Electorate
from seqphragmen import engine
from seqphragmen.output import output, DETAILS

output.set_verbosity(DETAILS)

# the two ballots of "C" count as two independent voters
electorate = Electorate(
    [
        ("A", 10, ["X", "Y"]),
        ("B", 20, ["X", "Z"]),
        ("C", 30, ["Y", "Z"]),
        ("C", 50, ["Z"]),
    ]
)
num_to_elect = 2
print(
    f"Computing {num_to_elect} winners with Phragmen's sequential rule\n"
    f"given the following {electorate}\n"
)
state = engine.seq_phragmen(electorate, num_to_elect, algorithm="standard-fractions")
print("elected:", ", ".join(sorted(state.elected_names())))
