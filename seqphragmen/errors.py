"""
Errors raised when an election cannot be computed.

All of them signal a contract violation by the caller; an election is a pure, deterministic
computation and is never retried. They derive from `ValueError`.
"""


class ElectionError(ValueError):
    """Base class of all errors raised by seqphragmen."""


class EmptyInput(ElectionError):
    """
    Error: no ballots were supplied.
    """

    def __init__(self):
        super().__init__("Cannot compute an election without ballots.")


class InvalidBudget(ElectionError):
    """
    Error: the budget of a voter is not a finite number > 0.

    Parameters
    ----------
        voter_id : str
            Identifier of the voter.

        budget : number
            The invalid budget.
    """

    def __init__(self, voter_id, budget):
        self.voter_id = voter_id
        self.budget = budget
        message = f"Budget of voter {voter_id} should be a finite number > 0, not {budget}."
        super().__init__(message)


class MalformedBallot(ElectionError):
    """
    Error: a ballot is not a triple `(voter_id, budget, approvals)` or approves a candidate twice.

    Parameters
    ----------
        ballot : object
            The malformed ballot.

        reason : str
            What is wrong with it.
    """

    def __init__(self, ballot, reason):
        self.ballot = ballot
        message = f"Malformed ballot {ballot!r}: {reason}."
        super().__init__(message)


class NoCandidates(ElectionError):
    """
    Error: no ballot approves any candidate.
    """

    def __init__(self):
        super().__init__("The ballots do not approve any candidate.")


class InsufficientCandidates(ElectionError):
    """
    Error: more seats than candidates.

    Parameters
    ----------
        num_to_elect : int
            The requested number of winners.

        num_cand : int
            The number of distinct candidates.
    """

    def __init__(self, num_to_elect, num_cand):
        self.num_to_elect = num_to_elect
        self.num_cand = num_cand
        message = (
            f"num_to_elect = {num_to_elect} is larger than the number of "
            f"candidates ({num_cand})."
        )
        super().__init__(message)


class ZeroApprovalCandidate(ElectionError):
    """
    Error: the score of a candidate would be computed against an approval of zero.

    Parameters
    ----------
        cand_id : str
            Identifier of the candidate.
    """

    def __init__(self, cand_id):
        self.cand_id = cand_id
        message = f"Candidate {cand_id} has no approval, its score is undefined."
        super().__init__(message)


class UnknownAlgorithm(ElectionError):
    """
    Error: unknown (or not installed) arithmetic for seq-Phragmen.

    Parameters
    ----------
        algorithm : str
            The unknown algorithm.
    """

    def __init__(self, algorithm):
        self.algorithm = algorithm
        message = f"Algorithm {algorithm} not specified for seq-Phragmen."
        super().__init__(message)
