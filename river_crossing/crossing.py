from enum import Enum
from typing import Callable, List, Optional
from river_crossing.BFSFramework import BFSFramework

BOAT_CAPACITY = 2
MIN_BOAT_LOAD = 1

class BoatSide(Enum):
    LEFT = "left"
    RIGHT = "right"

    def other(self):
        return BoatSide.RIGHT if self is BoatSide.LEFT else BoatSide.LEFT


class State:
    """
        One configuration of the river: who stands on which bank and where the boat is
    """

    __slots__ = ("left_missionaries", "left_cannibals", "right_missionaries", "right_cannibals", "boat")

    def __init__(self, left_missionaries : int = 0, left_cannibals : int = 0,
                 right_missionaries : int = 0, right_cannibals : int = 0,
                 boat : BoatSide = BoatSide.LEFT):
        object.__setattr__(self, "left_missionaries", left_missionaries)
        object.__setattr__(self, "left_cannibals", left_cannibals)
        object.__setattr__(self, "right_missionaries", right_missionaries)
        object.__setattr__(self, "right_cannibals", right_cannibals)
        object.__setattr__(self, "boat", boat)

    @classmethod
    def initial(cls, missionaries : int, cannibals : int) -> "State":
        return cls(missionaries, cannibals, 0, 0, BoatSide.LEFT)

    def __setattr__(self, name, value):
        raise AttributeError("State is immutable")

    def __reduce__(self):
        # copy and pickle rebuild through __init__, never through __setattr__
        return (State, self.state())

    def __eq__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self.state() == other.state()

    def __hash__(self):
        return hash(self.state())

    def __repr__(self):
        return "State(L=%dM/%dC, R=%dM/%dC, boat=%s)" % (
            self.left_missionaries, self.left_cannibals,
            self.right_missionaries, self.right_cannibals, self.boat.value)

    @property
    def boat_on_left(self) -> bool:
        return self.boat is BoatSide.LEFT

    def state(self):
        return (self.left_missionaries, self.left_cannibals,
                self.right_missionaries, self.right_cannibals, self.boat)

    def cross(self, m : int, c : int) -> "State":
        """
            Ferry m missionaries and c cannibals from the boat's bank to the other one
        """
        if self.boat_on_left:
            return State(self.left_missionaries - m, self.left_cannibals - c,
                         self.right_missionaries + m, self.right_cannibals + c,
                         self.boat.other())
        return State(self.left_missionaries + m, self.left_cannibals + c,
                     self.right_missionaries - m, self.right_cannibals - c,
                     self.boat.other())


def is_safe(state : State) -> bool:

    """
        Missionaries on a bank must not be outnumbered by the cannibals there,
        unless that bank has no missionaries at all
    """

    left_eaten = state.left_missionaries != 0 and state.left_missionaries < state.left_cannibals
    right_eaten = state.right_missionaries != 0 and state.right_missionaries < state.right_cannibals
    return not left_eaten and not right_eaten

def get_valid_moves(state : State) -> List[State]:

    """
        Every safe state one boat trip away from state, in ascending (m, c) order
    """

    if state.boat_on_left:
        (bank_m, bank_c) = (state.left_missionaries, state.left_cannibals)
    else:
        (bank_m, bank_c) = (state.right_missionaries, state.right_cannibals)

    moves = []
    for m in range(bank_m + 1):
        for c in range(bank_c + 1):
            if not MIN_BOAT_LOAD <= m + c <= BOAT_CAPACITY:
                continue
            new_state = state.cross(m, c)
            if is_safe(new_state):
                moves.append(new_state)
    return moves

def is_goal_state(state : State) -> bool:
    # everyone across, and the boat with them
    return state.left_missionaries == 0 and state.left_cannibals == 0 and not state.boat_on_left

def format_state(state : State) -> str:
    return ("Current State: \n"
            "\tMissionaries on the left: {}\n"
            "\tCannibals on the left: {}\n"
            "\tMissionaries on the right: {}\n"
            "\tCannibals on the right: {}\n"
            "\tBoat on the left: {}").format(
                state.left_missionaries, state.left_cannibals,
                state.right_missionaries, state.right_cannibals,
                "true" if state.boat_on_left else "false")

def solve_missionaries_cannibals(initial_state : State,
                                 trace : Optional[Callable[[str], None]] = print) -> bool:
    """
    Breadth-first search for any sequence of crossings that gets everybody to the right bank.

    Args:
        initial_state: Where the search starts.
        trace: Receives the formatted block of every expanded state. None disables tracing.

    Returns:
        True if the goal is reachable from initial_state.
    """
    on_visit = None
    if trace is not None:
        on_visit = lambda s: trace(format_state(s))

    bfs = BFSFramework(is_goal_state=is_goal_state, get_next_states=get_valid_moves, on_visit=on_visit)
    return bfs.search(initial_state)
