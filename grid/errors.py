class GridStructureError(RuntimeError):
    """
    A shape's own edge could not be located among the grid boundaries.

    Boundaries are derived from the very shapes being mapped, so this only
    happens when tolerance handling is inconsistent between stages.
    """
