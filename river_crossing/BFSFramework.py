
from collections import deque
from typing import TypeVar, Generic, List, Callable, Any, Optional

# Generic type for state representation
S = TypeVar('S')

class BFSFramework(Generic[S]):
    """
    A generic framework for breadth-first search.

    Args:
        is_goal_state: Function that determines if a state is the goal state.
        get_next_states: Function that returns possible next states from the current state.
        state_to_hashable: Function that converts a state to a hashable representation for visited tracking.
        on_visit: Optional hook called once for every state as it is expanded, before the goal test.
    """

    def __init__(
        self,
        is_goal_state: Callable[[S], bool],
        get_next_states: Callable[[S], List[S]],
        state_to_hashable: Callable[[S], Any] = None,
        on_visit: Optional[Callable[[S], None]] = None
    ):
        self.is_goal_state = is_goal_state
        self.get_next_states = get_next_states
        self.state_to_hashable = state_to_hashable or (lambda x: x)  # Default to identity function
        self.on_visit = on_visit
        self.explored = 0

    def search(self, initial_state: S) -> bool:
        """
        Perform breadth-first search from initial_state until a goal state is dequeued.

        Visited states are deduplicated when they leave the frontier, so a state
        can sit in the queue more than once but is only ever expanded once.

        Args:
            initial_state: The starting state for the search.

        Returns:
            True if a goal state is reachable, False once the frontier runs dry.
        """
        # Queue of states to explore
        queue = deque([initial_state])

        # Set of expanded states (using hashable representation)
        visited = set()
        self.explored = 0

        while queue:
            current_state = queue.popleft()
            hashable_current = self.state_to_hashable(current_state)

            if hashable_current in visited:
                continue

            visited.add(hashable_current)
            self.explored += 1

            if self.on_visit is not None:
                self.on_visit(current_state)

            if self.is_goal_state(current_state):
                return True

            for next_state in self.get_next_states(current_state):
                if self.state_to_hashable(next_state) not in visited:
                    queue.append(next_state)

        # Frontier exhausted
        return False
