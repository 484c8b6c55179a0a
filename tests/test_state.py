"""
Unit tests for seqphragmen/state.py.
"""

import copy
from fractions import Fraction
import pytest

from seqphragmen import engine, misc
from seqphragmen.ballots import Electorate
from seqphragmen.state import ElectionState, number_type, available_algorithms
from seqphragmen.errors import InvalidBudget, UnknownAlgorithm

BALLOTS = [
    ("A", 10, ["X", "Y"]),
    ("B", 20, ["X", "Z"]),
    ("C", 30, ["Y", "Z"]),
    ("C", 50, ["Z"]),
]


@pytest.fixture
def electorate():
    return Electorate(BALLOTS)


@pytest.fixture
def state(electorate):
    return ElectionState(electorate.voters, electorate.candidates)


def test_initial_state(state):
    assert state.canapproval == [30, 40, 100]
    assert state.voterload == [0, 0, 0, 0]
    assert state.edgeload == [0] * 7
    assert state.edgeweight == [0] * 7
    assert state.cansupport == [0, 0, 0]
    assert state.canscore == [0, 0, 0]
    assert state.canscorenumerator == [0, 0, 0]
    assert state.canscoredenominator == [1.0, 1.0, 1.0]
    assert state.canelected == [False, False, False]
    assert state.electedcandidates == set()
    assert [edge.index for edge in state.edgelist] == list(range(7))
    assert all(isinstance(value, float) for value in state.canapproval)


def test_set_load_keeps_maximum(state):
    edge_x, edge_y = state.voterlist[0].edges
    state.set_load(edge_x, 0.5)
    assert state.edgeload[edge_x.index] == 0.5
    assert state.voterload[0] == 0.5
    state.set_load(edge_y, 0.25)
    assert state.edgeload[edge_y.index] == 0.25
    assert state.voterload[0] == 0.5
    state.set_load(edge_y, 0.75)
    assert state.voterload[0] == 0.75
    assert state.voterload[1:] == [0, 0, 0]


def test_set_weight_updates_support(state):
    edge_xb, edge_zb = state.voterlist[1].edges
    state.set_weight(edge_xb, 5.0)
    assert state.edgeweight[edge_xb.index] == 5.0
    assert state.cansupport == [5.0, 0, 0]
    state.set_weight(state.voterlist[0].edges[0], 2.0)
    assert state.cansupport == [7.0, 0, 0]
    state.set_weight(edge_xb, 1.0)
    assert state.cansupport == [3.0, 0, 0]
    state.set_weight(edge_zb, 4.0)
    assert state.cansupport == [3.0, 0, 4.0]


def test_set_score(state, electorate):
    state.set_score(electorate.candidates[1], 0.5)
    state.set_score(2, 0.25)
    assert state.canscore == [0, 0.5, 0.25]


def test_elect_unelect(state, electorate):
    state.elect(electorate.candidates[2])
    state.elect(0)
    assert state.electedcandidates == {0, 2}
    assert state.canelected == [True, False, True]
    assert state.unelected() == [1]
    assert state.elected_names() == {"X", "Z"}
    state.unelect(0)
    assert state.electedcandidates == {2}
    assert state.canelected == [False, False, True]
    state.unelect(0)
    assert state.electedcandidates == {2}


def test_loads_to_weights(state):
    edges = state.edgelist
    state.set_load(edges[0], 0.25)
    state.set_load(edges[1], 0.5)
    state.loads_to_weights()
    assert state.edgeweight[0] == 5.0
    assert state.edgeweight[1] == 10.0
    # voters without load keep their weights
    assert state.edgeweight[2:] == [0] * 5
    assert state.cansupport == [5.0, 10.0, 0]


@pytest.mark.parametrize(
    "algorithm",
    [
        "float-fractions",
        "standard-fractions",
        pytest.param("gmpy2-fractions", marks=pytest.mark.gmpy2),
    ],
)
@pytest.mark.parametrize("num_to_elect", [0, 1, 2, 3])
def test_round_trip(algorithm, num_to_elect):
    state = engine.seq_phragmen(BALLOTS, num_to_elect, algorithm=algorithm)
    loads = list(state.edgeload)
    weights = list(state.edgeweight)
    voterload = list(state.voterload)

    state.weights_to_loads()
    for load, expected in zip(state.edgeload, loads):
        assert misc.isclose(load, expected)
    for load, expected in zip(state.voterload, voterload):
        assert misc.isclose(load, expected)

    state.loads_to_weights()
    for weight, expected in zip(state.edgeweight, weights):
        assert misc.isclose(weight, expected)
    for cand in state.candidates:
        support = sum(
            state.edgeweight[edge.index] for edge in state.edgelist if edge.canindex == cand.index
        )
        assert misc.isclose(state.cansupport[cand.index], support)


def test_round_trip_exact():
    state = engine.seq_phragmen(BALLOTS, 2, algorithm="standard-fractions")
    loads, weights = list(state.edgeload), list(state.edgeweight)
    state.weights_to_loads()
    state.loads_to_weights()
    assert state.edgeload == loads
    assert state.edgeweight == weights
    assert state.cansupport == [0, 40, Fraction(1030, 13)]


def test_copy_is_independent(electorate):
    state = engine.seq_phragmen(electorate, 1)
    for snapshot in [
        state.copy(),
        copy.copy(state),
        copy.deepcopy(state),
        ElectionState(electorate.voters, electorate.candidates, copy_state=state),
    ]:
        assert snapshot.voterload == state.voterload
        assert snapshot.electedcandidates == state.electedcandidates
        assert snapshot.detailed_info == state.detailed_info
        snapshot.elect(0)
        snapshot.set_load(snapshot.edgelist[0], 1.0)
        snapshot.set_weight(snapshot.edgelist[0], 1.0)
        snapshot.detailed_info["next_cand"].append(0)
        assert state.electedcandidates == {2}
        assert state.voterload[0] == 0
        assert state.edgeweight[0] == 0
        assert state.detailed_info["next_cand"] == [2]


def test_copy_with_mismatching_voters(state):
    other = Electorate([("v", 1, ["a"])])
    with pytest.raises(ValueError):
        ElectionState(other.voters, other.candidates, copy_state=state)


def test_copy_with_equal_voter_lists():
    old = Electorate([("a", 1, ["x"]), ("b", 1, ["y"])])
    state = engine.seq_phragmen(old, 1)
    new = Electorate([("a", 1, ["x"]), ("b", 1, ["y"])])
    snapshot = ElectionState(new.voters, new.candidates, copy_state=state)
    assert snapshot.voterlist is not state.voterlist
    assert snapshot.edgelist == new.edges
    assert engine.elect_next(snapshot) == 1
    assert snapshot.electedcandidates == {0, 1}
    assert state.electedcandidates == {0}


@pytest.mark.parametrize(
    "ballots",
    [
        [("a", 1, ["x", "y"]), ("b", 5, ["y"])],
        [("a", 1, []), ("b", 1, ["x", "y"])],
        [("a", 1, ["x"]), ("b", 5, ["y"])],
    ],
)
def test_copy_with_different_structure(ballots):
    old = Electorate([("a", 1, ["x"]), ("b", 1, ["y"])])
    state = engine.seq_phragmen(old, 1)
    new = Electorate(ballots)
    with pytest.raises(ValueError):
        ElectionState(new.voters, new.candidates, copy_state=state)
    assert state.budget == [1.0, 1.0]
    assert len(state.edgeload) == 2


def test_number_type():
    convert, division = number_type("standard-fractions")
    assert convert(0.5) == Fraction(1, 2)
    assert division(1, 3) == Fraction(1, 3)
    convert, division = number_type("float-fractions")
    assert convert(2) == 2.0
    assert division(1, 4) == 0.25
    with pytest.raises(UnknownAlgorithm):
        number_type("fastest")
    assert "float-fractions" in available_algorithms
    assert "standard-fractions" in available_algorithms


def test_str(state):
    state.elect(1)
    assert str(state) == "election state with 1 elected candidates {Y}"


def test_scores_of_unelected():
    state = engine.seq_phragmen(BALLOTS, 1, algorithm="standard-fractions")
    assert state.scores_of_unelected() == {0: Fraction(1, 30), 1: Fraction(1, 40)}


def test_budget_too_large_for_floats():
    electorate = Electorate([("v1", 10**400, ["a"])])
    with pytest.raises(InvalidBudget) as excinfo:
        ElectionState(electorate.voters, electorate.candidates)
    assert excinfo.value.voter_id == "v1"
    state = ElectionState(
        electorate.voters, electorate.candidates, algorithm="standard-fractions"
    )
    assert state.canapproval == [10**400]
