"""
seqphragmen: multi-winner approval elections with Phragmen's sequential rule.
"""

__version__ = "1.0.0"

from seqphragmen.engine import run_election, seq_phragmen  # noqa: F401,E402
