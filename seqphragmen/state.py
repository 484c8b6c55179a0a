"""
The mutable state of a seq-Phragmen election.

All numbers of an election are stored in parallel lists that are addressed by the indices
assigned in :mod:`seqphragmen.ballots`: one entry per voter, per candidate, or per edge.
The voters and candidates themselves are read-only reference data.

Module Attributes
-----------------
ALGORITHM_NAMES : dict of str to str
    Valid identifiers of the arithmetic used for loads and scores, mapped to their
    descriptions.

DEFAULT_ALGORITHM : str
    The arithmetic used if none is given.
"""

import copy
from fractions import Fraction
from seqphragmen.ballots import Candidate
from seqphragmen.errors import InvalidBudget, UnknownAlgorithm
from seqphragmen import misc

try:
    from gmpy2 import mpq
except ImportError:
    mpq = None


ALGORITHM_NAMES = {
    "float-fractions": "Standard algorithm (using floats instead of fractions)",
    "standard-fractions": "Standard algorithm (using standard Python fractions)",
    "gmpy2-fractions": "Standard algorithm (using gmpy2 fractions)",
}

DEFAULT_ALGORITHM = "float-fractions"


def _available_algorithms():
    """Return the algorithms whose number types are installed."""
    return [
        algorithm
        for algorithm in ALGORITHM_NAMES
        if algorithm != "gmpy2-fractions" or mpq is not None
    ]


available_algorithms = _available_algorithms()


def number_type(algorithm):
    """
    Return the number type and the division used by `algorithm`.

    Parameters
    ----------
        algorithm : str
            One of `ALGORITHM_NAMES`.

    Returns
    -------
        tuple of (callable, callable)
            A conversion `convert(x)` applied to budgets and a division `division(x, y)`.
    """
    if algorithm == "float-fractions":
        return float, lambda x, y: x / y  # standard float division
    if algorithm == "standard-fractions":
        return Fraction, lambda x, y: Fraction(x) / y  # Python built-in fractions
    if algorithm == "gmpy2-fractions":
        if not mpq:
            raise ImportError(
                'Module gmpy2 not available, required for algorithm "gmpy2-fractions"'
            )
        return mpq, lambda x, y: mpq(x) / y
    raise UnknownAlgorithm(algorithm)


def _convert_budgets(voters, convert):
    budgets = []
    for voter in voters:
        try:
            budgets.append(convert(voter.budget))
        except OverflowError:
            # too large for the number type, e.g., a huge int as float
            raise InvalidBudget(voter.voter_id, voter.budget)
    return budgets


def _cand_index(cand):
    if isinstance(cand, Candidate):
        return cand.index
    return cand


class ElectionState:
    """
    Loads, weights, scores and elected candidates of one election.

    Parameters
    ----------
        voters : list of seqphragmen.ballots.Voter
            The indexed voters.

        candidates : list of seqphragmen.ballots.Candidate
            The indexed candidates.

        copy_state : ElectionState, optional
            If given, the new state is an independent copy of the numbers of `copy_state`,
            paired with `voters` and `candidates`. These may be different objects, but must
            have the same edges and budgets as those of `copy_state`, otherwise a
            `ValueError` is raised.

        algorithm : str, default=DEFAULT_ALGORITHM
            The arithmetic, one of `ALGORITHM_NAMES`. Ignored if `copy_state` is given.

    Attributes
    ----------
        voterload : list
            Per voter: the maximum load over the voter's edges. Never decreases.

        edgeload, edgeweight : list
            Per edge: load and weight.

        canapproval : list
            Per candidate: the sum of budgets of its approvers. Fixed at construction.

        cansupport : list
            Per candidate: the sum of the weights of its edges.

        canscore, canscorenumerator, canscoredenominator : list
            Per candidate: the score of the last round it was unelected in, as well as
            numerator and denominator of this score.

        canelected : list of bool
            Per candidate: whether it is elected.

        electedcandidates : seqphragmen.misc.CandidateSet
            Indices of the elected candidates.

        detailed_info : dict of str to list
            One entry per round: `next_cand`, `tied_cands`, `scores`, `load`, `max_load`.
    """

    def __init__(self, voters, candidates, copy_state=None, algorithm=DEFAULT_ALGORITHM):
        self.voterlist = list(voters)
        self.candidates = list(candidates)

        if copy_state is not None:
            if len(self.voterlist) != len(copy_state.voterload) or len(self.candidates) != len(
                copy_state.canapproval
            ):
                raise ValueError(
                    "Voters and candidates do not match the numbers of the copied state."
                )
            self.algorithm = copy_state.algorithm
            self.convert, self.division = number_type(self.algorithm)
            self.edgelist = [edge for voter in self.voterlist for edge in voter.edges]
            self.budget = _convert_budgets(self.voterlist, self.convert)
            if [
                (edge.index, edge.voterindex, edge.canindex) for edge in self.edgelist
            ] != [
                (edge.index, edge.voterindex, edge.canindex) for edge in copy_state.edgelist
            ]:
                raise ValueError("The edges of the voters do not match the copied state.")
            if self.budget != copy_state.budget:
                raise ValueError("The budgets of the voters do not match the copied state.")
            self.voterload = list(copy_state.voterload)
            self.edgeload = list(copy_state.edgeload)
            self.edgeweight = list(copy_state.edgeweight)
            self.cansupport = list(copy_state.cansupport)
            self.canelected = list(copy_state.canelected)
            self.electedcandidates = misc.CandidateSet(copy_state.electedcandidates)
            self.canapproval = list(copy_state.canapproval)
            self.canscore = list(copy_state.canscore)
            self.canscorenumerator = list(copy_state.canscorenumerator)
            self.canscoredenominator = list(copy_state.canscoredenominator)
            self.detailed_info = copy.deepcopy(copy_state.detailed_info)
            return

        self.algorithm = algorithm
        self.convert, self.division = number_type(algorithm)
        zero, one = self.convert(0), self.convert(1)
        num_voters = len(self.voterlist)
        num_cand = len(self.candidates)

        self.edgelist = [edge for voter in self.voterlist for edge in voter.edges]
        self.budget = _convert_budgets(self.voterlist, self.convert)
        self.canapproval = [zero] * num_cand
        for voter in self.voterlist:
            for edge in voter.edges:
                self.canapproval[edge.canindex] += self.budget[voter.index]

        self.voterload = [zero] * num_voters
        self.edgeload = [zero] * len(self.edgelist)
        self.edgeweight = [zero] * len(self.edgelist)
        self.cansupport = [zero] * num_cand
        self.canelected = [False] * num_cand
        self.electedcandidates = misc.CandidateSet()
        self.canscore = [zero] * num_cand
        self.canscorenumerator = [zero] * num_cand
        self.canscoredenominator = [one] * num_cand
        self.detailed_info = {
            "next_cand": [],
            "tied_cands": [],
            "scores": [],
            "load": [],
            "max_load": [],
        }

    def copy(self):
        """
        Return an independent copy of this state (with the same voters and candidates).

        Returns
        -------
            ElectionState
        """
        return ElectionState(self.voterlist, self.candidates, copy_state=self)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    @property
    def cand_names(self):
        """List of candidate identifiers, addressed by candidate index."""
        return [cand.cand_id for cand in self.candidates]

    def set_load(self, edge, load):
        """
        Set the load of `edge`; the load of its voter becomes the maximum over its edges.

        Parameters
        ----------
            edge : seqphragmen.ballots.Edge

            load : number
        """
        self.edgeload[edge.index] = load
        self.voterload[edge.voterindex] = max(self.voterload[edge.voterindex], load)

    def set_weight(self, edge, weight):
        """
        Set the weight of `edge` and update the support of its candidate accordingly.

        Parameters
        ----------
            edge : seqphragmen.ballots.Edge

            weight : number
        """
        oldweight = self.edgeweight[edge.index]
        self.edgeweight[edge.index] = weight
        self.cansupport[edge.canindex] += weight - oldweight

    def set_score(self, cand, score):
        """
        Set the score of a candidate.

        Parameters
        ----------
            cand : seqphragmen.ballots.Candidate or int
                A candidate or its index.

            score : number
        """
        self.canscore[_cand_index(cand)] = score

    def loads_to_weights(self):
        """
        Derive the weight of every edge from its load.

        The weight of an edge is the budget of its voter multiplied with the share of the
        edge's load in the voter's load. Voters without load keep their weights.
        """
        for voter in self.voterlist:
            voter_load = self.voterload[voter.index]
            if voter_load > 0:
                for edge in voter.edges:
                    weight = self.division(
                        self.budget[voter.index] * self.edgeload[edge.index], voter_load
                    )
                    self.set_weight(edge, weight)

    def weights_to_loads(self):
        """
        Derive the load of every edge from its weight; the inverse of `loads_to_weights()`.
        """
        for voter in self.voterlist:
            voter_load = self.voterload[voter.index]
            if voter_load > 0:
                for edge in voter.edges:
                    load = self.division(
                        self.edgeweight[edge.index] * voter_load, self.budget[voter.index]
                    )
                    self.set_load(edge, load)

    def elect(self, cand):
        """
        Mark a candidate as elected.

        Parameters
        ----------
            cand : seqphragmen.ballots.Candidate or int
        """
        index = _cand_index(cand)
        self.canelected[index] = True
        self.electedcandidates.add(index)

    def unelect(self, cand):
        """
        Withdraw the election of a candidate.

        Parameters
        ----------
            cand : seqphragmen.ballots.Candidate or int
        """
        index = _cand_index(cand)
        self.canelected[index] = False
        self.electedcandidates.discard(index)

    def unelected(self):
        """Indices of all candidates that are not elected, in ascending order."""
        return [cand.index for cand in self.candidates if not self.canelected[cand.index]]

    def scores_of_unelected(self):
        """
        Return the current score of every unelected candidate.

        Returns
        -------
            dict of int to number
        """
        return {cand: self.canscore[cand] for cand in self.unelected()}

    def elected_names(self):
        """
        Return the identifiers of the elected candidates.

        Returns
        -------
            set of str
        """
        return {self.candidates[cand].cand_id for cand in self.electedcandidates}

    def __str__(self):
        return (
            f"election state with {len(self.electedcandidates)} elected candidates "
            f"{self.electedcandidates.str_with_names(self.cand_names)}"
        )
