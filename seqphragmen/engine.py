"""
Phragmen's sequential rule (seq-Phragmen).

For a mathematical description of this rule, see e.g.
"Multi-Winner Voting with Approval Preferences".
Martin Lackner and Piotr Skowron.
<http://dx.doi.org/10.1007/978-3-031-09016-5>

Every round consists of four phases:

1. every unelected candidate gets the base score `1 / approval`,
2. every voter adds `budget * load / approval` to the score of each unelected candidate
   it approves,
3. the unelected candidate with the smallest score is elected (ties are broken in favor of
   the candidate with the lowest index),
4. the load of every voter approving the elected candidate is raised to its score.

After the last round, loads are converted to weights.
"""

import numbers
from seqphragmen.output import output
from seqphragmen.ballots import Electorate
from seqphragmen.state import ElectionState, ALGORITHM_NAMES, DEFAULT_ALGORITHM
from seqphragmen.state import available_algorithms  # noqa: F401
from seqphragmen.errors import (
    NoCandidates,
    InsufficientCandidates,
    ZeroApprovalCandidate,
    UnknownAlgorithm,
)
from seqphragmen.misc import header, str_set_of_candidates, str_loads
from seqphragmen import misc


def _verify_num_to_elect(num_to_elect):
    if (
        not isinstance(num_to_elect, numbers.Integral)
        or isinstance(num_to_elect, bool)
        or num_to_elect < 0
    ):
        raise ValueError(f"num_to_elect must be a non-negative integer, not {num_to_elect!r}.")


def _compute_scores(state):
    """Phases 1 and 2: compute the score of every unelected candidate."""
    one = state.convert(1)
    for cand in state.candidates:
        if state.canelected[cand.index]:
            continue
        approval = state.canapproval[cand.index]
        if not approval > 0:
            raise ZeroApprovalCandidate(cand.cand_id)
        state.set_score(cand, state.division(one, approval))
        state.canscorenumerator[cand.index] = one
        state.canscoredenominator[cand.index] = approval

    for voter in state.voterlist:
        budget = state.budget[voter.index]
        load = state.voterload[voter.index]
        for edge in voter.edges:
            if state.canelected[edge.canindex]:
                continue
            contribution = budget * load
            state.canscore[edge.canindex] += state.division(
                contribution, state.canapproval[edge.canindex]
            )
            state.canscorenumerator[edge.canindex] += contribution


def elect_next(state):
    """
    Perform one round of seq-Phragmen on `state`.

    Parameters
    ----------
        state : seqphragmen.state.ElectionState
            The state of the election; it is modified.

    Returns
    -------
        int
            The index of the newly elected candidate.
    """
    unelected = state.unelected()
    if not unelected:
        raise InsufficientCandidates(len(state.electedcandidates) + 1, len(state.candidates))

    _compute_scores(state)
    output.debug(
        "scores: "
        + ", ".join(
            f"{state.candidates[cand].cand_id}: {state.canscore[cand]}" for cand in unelected
        )
    )

    # strictly smaller: the first candidate reaching the minimum wins
    next_cand = unelected[0]
    for cand in unelected[1:]:
        if state.canscore[cand] < state.canscore[next_cand]:
            next_cand = cand
    opt = state.canscore[next_cand]
    if state.algorithm == "float-fractions":
        tied_cands = [cand for cand in unelected if misc.isclose(state.canscore[cand], opt)]
    else:
        tied_cands = [cand for cand in unelected if state.canscore[cand] == opt]

    state.elect(next_cand)
    for voter in state.voterlist:
        for edge in voter.edges:
            if edge.canindex == next_cand:
                state.set_load(edge, opt)

    state.detailed_info["next_cand"].append(next_cand)
    state.detailed_info["tied_cands"].append(tied_cands)
    state.detailed_info["scores"].append(list(state.canscore))  # create copy
    state.detailed_info["load"].append(list(state.voterload))  # create copy
    state.detailed_info["max_load"].append(opt)
    return next_cand


def seq_phragmen(ballots, num_to_elect, algorithm=DEFAULT_ALGORITHM):
    """
    Compute an election with Phragmen's sequential rule (seq-Phragmen).

    Parameters
    ----------
        ballots : iterable of tuple or seqphragmen.ballots.Electorate
            Ballots of the form `(voter_id, budget, approvals)`, or an already indexed
            electorate.

        num_to_elect : int
            The number of candidates to elect.

        algorithm : str, optional
            The arithmetic to be used, one of

            .. doctest::

                >>> sorted(ALGORITHM_NAMES)
                ['float-fractions', 'gmpy2-fractions', 'standard-fractions']

    Returns
    -------
        seqphragmen.state.ElectionState
            The final state: `electedcandidates` holds the indices of the winners,
            `elected_names()` their identifiers.
    """
    _verify_num_to_elect(num_to_elect)
    if algorithm not in ALGORITHM_NAMES:
        raise UnknownAlgorithm(algorithm)
    if isinstance(ballots, Electorate):
        electorate = ballots
    else:
        electorate = Electorate(ballots)
    if electorate.num_cand == 0:
        raise NoCandidates()
    if num_to_elect > electorate.num_cand:
        raise InsufficientCandidates(num_to_elect, electorate.num_cand)

    state = ElectionState(electorate.voters, electorate.candidates, algorithm=algorithm)
    for _ in range(num_to_elect):
        elect_next(state)
    state.loads_to_weights()

    # optional output
    output.info(header("Phragmen's sequential rule (seq-Phragmen)"), wrap=False)
    output.details(f"Algorithm: {ALGORITHM_NAMES[algorithm]}\n")
    _print_rounds(state)
    output.info(
        "winning committee:\n "
        + str_set_of_candidates(state.electedcandidates, cand_names=state.cand_names)
        + "\n"
    )
    output.details("corresponding load distribution:")
    output.details(str_loads(state.voterload) + "\n", indent=" ")
    for cand in sorted(state.electedcandidates):
        output.debug(f"support of {state.candidates[cand].cand_id}: {state.cansupport[cand]}")
    # end of optional output

    return state


def _print_rounds(state):
    detailed_info = state.detailed_info
    cand_names = state.cand_names
    for i, next_cand in enumerate(detailed_info["next_cand"]):
        tied_cands = detailed_info["tied_cands"][i]
        max_load = detailed_info["max_load"][i]
        output.details(f"adding candidate number {i + 1}: {cand_names[next_cand]}")
        output.details(f"maximum load increased to {max_load}", indent=" ")
        output.details(" load distribution:")
        output.details(str_loads(detailed_info["load"][i]), indent="  ")
        if len(tied_cands) > 1:
            output.details(f"tie broken in favor of {cand_names[next_cand]},", indent=" ")
            output.details(
                f"candidates {str_set_of_candidates(tied_cands, cand_names=cand_names)}"
                " are tied",
                indent=" ",
            )
            output.details(f"(for all those new maximum load = {max_load}).", indent=" ")
        output.details("")


def run_election(ballots, num_to_elect, algorithm=DEFAULT_ALGORITHM):
    """
    Return the winners of a seq-Phragmen election.

    Parameters
    ----------
        ballots : iterable of tuple
            Ballots of the form `(voter_id, budget, approvals)`.

        num_to_elect : int
            The number of candidates to elect.

        algorithm : str, optional
            The arithmetic to be used, see :func:`seq_phragmen`.

    Returns
    -------
        set of str
            The identifiers of the elected candidates.

    Examples
    --------
    .. doctest::

        >>> ballots = [
        ...     ("A", 10, ["X", "Y"]),
        ...     ("B", 20, ["X", "Z"]),
        ...     ("C", 30, ["Y", "Z"]),
        ...     ("C", 50, ["Z"]),
        ... ]
        >>> sorted(run_election(ballots, 2))
        ['Y', 'Z']
    """
    return seq_phragmen(ballots, num_to_elect, algorithm=algorithm).elected_names()
