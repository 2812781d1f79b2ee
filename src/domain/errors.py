"""Domain errors raised by the projection core."""


class ScenarioNotFoundError(LookupError):
    """Scenario is missing or belongs to another user.

    Both cases share one error so callers cannot probe for existence.
    """

    def __init__(self, scenario_id: str) -> None:
        super().__init__(f"Scenario not found: {scenario_id}")
        self.scenario_id = scenario_id


class EmptyProjectionError(ValueError):
    """Metrics were requested over a projection with no points."""

    def __init__(self) -> None:
        super().__init__("Cannot compute metrics without projection points")


class InvalidActionError(ValueError):
    """Scenario action record cannot be turned into a known action."""


class UnknownTimeHorizonError(ValueError):
    """Time horizon code is not supported."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Unknown time horizon: {code}")
        self.code = code


__all__ = [
    "ScenarioNotFoundError",
    "EmptyProjectionError",
    "InvalidActionError",
    "UnknownTimeHorizonError",
]
