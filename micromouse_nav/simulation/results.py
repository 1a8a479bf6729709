"""
Run Results Module
==================

Outcome of a simulated run.
"""

from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field


class RunStatus:
    """Enumeration of run status types"""
    SUCCESS = 'success'
    COLLISION = 'collision'
    DEAD_END = 'dead_end'
    TIMEOUT = 'timeout'
    UNKNOWN = 'unknown'


@dataclass
class RunResult:
    """Complete result of one run from a start cell towards a goal"""
    status: str = RunStatus.UNKNOWN
    failure_type: Optional[str] = None

    # Visited cells, start included
    path: List[Tuple[int, int]] = field(default_factory=list)

    # Relative moves as log strings ('F^', 'L<', ...)
    moves: List[str] = field(default_factory=list)

    steps: int = 0
    turns: int = 0
    total_time_s: float = 0.0

    info: Dict = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status == RunStatus.SUCCESS

    @property
    def backtracks(self) -> int:
        return self.moves.count('Bv')

    def to_dict(self) -> Dict:
        return {
            'status': self.status,
            'failure_type': self.failure_type,
            'path_length': len(self.path),
            'steps': self.steps,
            'turns': self.turns,
            'backtracks': self.backtracks,
            'total_time_s': self.total_time_s,
            'info': self.info,
        }
