"""Job status machine driven by the field portal.

``pendente -> em_execucao -> concluida`` only moves forward (skipping a step
is allowed); ``cancelada`` is reachable from any non-terminal state.
"""

from ..models.job import JobStatus
from ..utils.errors import InvalidStatusTransition

_RANK = {
    JobStatus.PENDING: 0,
    JobStatus.IN_PROGRESS: 1,
    JobStatus.DONE: 2,
}

TERMINAL = frozenset({JobStatus.DONE, JobStatus.CANCELLED})


def check_transition(current: JobStatus, target: JobStatus) -> bool:
    """Return ``True`` when the status changes, ``False`` for a no-op."""
    if current == target:
        return False
    if current in TERMINAL:
        raise InvalidStatusTransition(
            "Status da OS não pode ser alterado",
            f"OS já está {current.value}",
        )
    if target == JobStatus.CANCELLED:
        return True
    if _RANK[target] < _RANK[current]:
        raise InvalidStatusTransition(
            "Status da OS não pode ser alterado",
            f"Transição inválida: {current.value} -> {target.value}",
        )
    return True
