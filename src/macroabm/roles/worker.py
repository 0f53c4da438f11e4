from macroabm.core.decorators import role
from macroabm.typing import Bool1D, Float1D, Int1D

UNEMPLOYED = 0
"""Employer reference of a worker without a job."""


@role
class Worker:
    """
    Worker role for households.

    ``employer`` holds the ``firm_id`` of the current employer, or
    ``UNEMPLOYED``.
    """

    employer: Int1D  # Oc
    wage: Float1D  # w

    @property
    def employed(self) -> Bool1D:
        return self.employer != UNEMPLOYED
