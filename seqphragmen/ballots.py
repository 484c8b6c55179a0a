"""
Ballots, voters and candidates.

.. important::

    - An election is given by a list of ballots `(voter_id, budget, approvals)`.
    - Voters are indexed by `0`, ..., `len(electorate)-1` in the order of the ballots.
      Two ballots with the same `voter_id` are two independent voters.
    - Candidates are indexed by `0`, ..., `electorate.num_cand-1` in the order in which
      they first appear in the approval lists.
    - Every approval of a candidate by a voter is an `Edge`; edges are numbered globally,
      voter by voter and, within a voter, in the order of its approval list.
    - Edges only store indices; voters and candidates are looked up by index.
"""

import math
import numbers
from collections import OrderedDict
import networkx as nx
from seqphragmen.errors import EmptyInput, InvalidBudget, MalformedBallot
from seqphragmen import misc


class Candidate:
    """
    A candidate, i.e., an identifier together with its index.

    Parameters
    ----------
        cand_id : str
            The (opaque) identifier of the candidate.

        index : int
            The index of the candidate.
    """

    __slots__ = ("cand_id", "index")

    def __init__(self, cand_id, index):
        self.cand_id = cand_id
        self.index = index

    def __repr__(self):
        return f"Candidate({self.cand_id!r}, index={self.index})"

    def __str__(self):
        return str(self.cand_id)


class Edge:
    """
    The approval of one candidate by one voter.

    Parameters
    ----------
        index : int
            Global index of this edge.

        voterindex : int
            Index of the approving voter.

        canindex : int
            Index of the approved candidate.
    """

    __slots__ = ("index", "voterindex", "canindex")

    def __init__(self, index, voterindex, canindex):
        self.index = index
        self.voterindex = voterindex
        self.canindex = canindex

    def __repr__(self):
        return f"Edge({self.index}, voterindex={self.voterindex}, canindex={self.canindex})"


class Voter:
    """
    A voter with a budget and the edges to its approved candidates.

    Parameters
    ----------
        voter_id : str
            The identifier of the voter (not necessarily unique).

        budget : int or float or Fraction
            The voting weight; a finite number > 0.

        index : int
            The index of the voter.

        edges : list of Edge, optional
            Edges to the approved candidates, in the order of the approval list.
    """

    def __init__(self, voter_id, budget, index, edges=None):
        if not isinstance(budget, numbers.Real):
            raise TypeError(
                f"Object of type {str(type(budget))} not suitable as budget of voter {voter_id}."
            )
        if not budget > 0 or (not isinstance(budget, numbers.Rational) and math.isinf(budget)):
            raise InvalidBudget(voter_id, budget)
        self.voter_id = voter_id
        self.budget = budget
        self.index = index
        self.edges = [] if edges is None else list(edges)

    @property
    def approved(self):
        """The indices of the approved candidates."""
        return misc.CandidateSet(edge.canindex for edge in self.edges)

    def __str__(self):
        return str(self.approved)

    def str_with_names(self, cand_names=None):
        """
        Format the approval set of a voter, using the identifiers of candidates if provided.

        Parameters
        ----------
            cand_names : list of str, optional
                Identifier of every candidate.

        Returns
        -------
            str
        """
        return self.approved.str_with_names(cand_names)


def _split_ballot(ballot):
    try:
        voter_id, budget, approvals = ballot
    except (TypeError, ValueError):
        raise MalformedBallot(ballot, "expected a triple (voter_id, budget, approvals)")
    if isinstance(approvals, str):
        raise MalformedBallot(ballot, "approvals must be a sequence of candidate identifiers")
    try:
        approvals = list(approvals)
    except TypeError:
        raise MalformedBallot(ballot, "approvals must be a sequence of candidate identifiers")
    try:
        num_distinct = len(set(approvals))
    except TypeError:
        raise MalformedBallot(ballot, "candidate identifiers must be hashable")
    if num_distinct != len(approvals):
        raise MalformedBallot(ballot, "a candidate is approved more than once")
    return voter_id, budget, approvals


def index_ballots(ballots):
    """
    Assign indices to voters, candidates and edges.

    Parameters
    ----------
        ballots : iterable of tuple
            Ballots of the form `(voter_id, budget, approvals)` where `approvals` is an
            ordered sequence of candidate identifiers.

    Returns
    -------
        tuple of (list of Voter, list of Candidate)
            The voters (with populated edges) in input order and the candidates in the order
            of their first appearance.

    Examples
    --------
    .. doctest::

        >>> voters, candidates = index_ballots([("A", 10, ["X", "Y"]), ("B", 20, ["Y", "Z"])])
        >>> [cand.cand_id for cand in candidates]
        ['X', 'Y', 'Z']
        >>> voters[1].edges
        [Edge(2, voterindex=1, canindex=1), Edge(3, voterindex=1, canindex=2)]
    """
    voters = []
    candidates = []
    cand_index = {}
    num_edges = 0
    for ballot in ballots:
        voter_id, budget, approvals = _split_ballot(ballot)
        voter = Voter(voter_id, budget, index=len(voters))
        for cand_id in approvals:
            if cand_id not in cand_index:
                cand_index[cand_id] = len(candidates)
                candidates.append(Candidate(cand_id, len(candidates)))
            voter.edges.append(Edge(num_edges, voter.index, cand_index[cand_id]))
            num_edges += 1
        voters.append(voter)

    if not voters:
        raise EmptyInput()
    return voters, candidates


class Electorate:
    """
    Voters and candidates of an election, indexed.

    Parameters
    ----------
        ballots : iterable of tuple
            Ballots of the form `(voter_id, budget, approvals)`.

    Attributes
    ----------
        voters : list of Voter
            The voters in input order.

        candidates : list of Candidate
            The candidates in order of first appearance.
    """

    def __init__(self, ballots):
        self.voters, self.candidates = index_ballots(ballots)

    @property
    def num_cand(self):
        """Number of candidates."""
        return len(self.candidates)

    @property
    def cand_names(self):
        """List of candidate identifiers, addressed by candidate index."""
        return [cand.cand_id for cand in self.candidates]

    @property
    def edges(self):
        """All edges, ordered by edge index."""
        return [edge for voter in self.voters for edge in voter.edges]

    def __len__(self):
        return len(self.voters)

    def __iter__(self):
        return iter(self.voters)

    def __getitem__(self, i):
        return self.voters[i]

    def total_budget(self):
        """
        Return the sum of all budgets.

        Returns
        -------
            int or float or Fraction
        """
        return sum(voter.budget for voter in self.voters)

    def approvers(self, cand):
        """
        Return the indices of all voters that approve candidate `cand`.

        Parameters
        ----------
            cand : int
                Index of a candidate.

        Returns
        -------
            list of int
        """
        return [
            voter.index
            for voter in self.voters
            if any(edge.canindex == cand for edge in voter.edges)
        ]

    def to_networkx_graph(self):
        """
        Return the bipartite graph of voters and candidates.

        Voter nodes are `("voter", index)` with attributes `voter_id` and `budget`,
        candidate nodes are `("cand", index)` with attribute `cand_id`. Every edge carries its
        edge `index`.

        Returns
        -------
            networkx.Graph
        """
        graph = nx.Graph()
        for voter in self.voters:
            graph.add_node(
                ("voter", voter.index), bipartite=0, voter_id=voter.voter_id, budget=voter.budget
            )
        for cand in self.candidates:
            graph.add_node(("cand", cand.index), bipartite=1, cand_id=cand.cand_id)
        for edge in self.edges:
            graph.add_edge(("voter", edge.voterindex), ("cand", edge.canindex), index=edge.index)
        return graph

    def __str__(self):
        output = f"electorate with {len(self.voters)} voters and {self.num_cand} candidates:\n"
        for voter in self.voters:
            output += (
                f" voter {str(voter.index) + ':':4s} {voter.voter_id}, {voter.budget} * "
                f"{voter.str_with_names(self.cand_names)},\n"
            )
        return output[:-2]

    def str_compact(self):
        """
        Return a string that summarizes the electorate, merging equal approval sets.

        Returns
        -------
            str
        """
        compact = OrderedDict()
        for voter in self.voters:
            approved = tuple(sorted(edge.canindex for edge in voter.edges))
            compact[approved] = compact.get(approved, 0) + voter.budget
        output = f"electorate with {len(self.voters)} voters and {self.num_cand} candidates:\n"
        for approved, budget in compact.items():
            output += (
                f" {budget} x {misc.CandidateSet(approved).str_with_names(self.cand_names)},\n"
            )
        output = output[:-2]
        output += "\ntotal budget: " + str(self.total_budget()) + "\n"
        return output
