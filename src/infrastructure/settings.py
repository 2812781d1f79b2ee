"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
import math
import os

from src.domain.constants import DEFAULT_CACHE_MAX_SIZE, DEFAULT_CACHE_TTL_SECONDS
from src.domain.models.projection import ProjectionAssumptions
from src.infrastructure.logging.logger import get_app_logger


_ASSUMPTION_ENV_VARS = {
    "growth_rate": "PROJECTION_GROWTH_RATE",
    "debt_inflation_rate": "PROJECTION_DEBT_INFLATION_RATE",
    "capital_gains_tax_rate": "PROJECTION_CAPITAL_GAINS_TAX_RATE",
    "tax_impact_rate": "PROJECTION_TAX_IMPACT_RATE",
    "risk_free_rate": "PROJECTION_RISK_FREE_RATE",
    "liquid_share": "PROJECTION_LIQUID_SHARE",
}


@dataclass(frozen=True)
class ProjectionSettings:
    """Settings for the projection engine and the report cache.

    Attributes:
        assumptions: Growth, tax and liquidity assumptions.
        cache_ttl_seconds: Maximum age of a cached report.
        cache_max_size: Entry count above which the cache evicts.
    """

    assumptions: ProjectionAssumptions = field(
        default_factory=ProjectionAssumptions
    )
    cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS
    cache_max_size: int = DEFAULT_CACHE_MAX_SIZE

    @classmethod
    def from_env(cls) -> "ProjectionSettings":
        """Build settings from environment variables.

        Unset variables keep their defaults. Unparsable values are logged
        and replaced by the default.

        Returns:
            ProjectionSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        defaults = ProjectionAssumptions()
        overrides = {}
        for name, env_var in _ASSUMPTION_ENV_VARS.items():
            overrides[name] = cls._read_number(
                env_var,
                getattr(defaults, name),
                float,
                logger=logger,
            )
        return cls(
            assumptions=ProjectionAssumptions(**overrides),
            cache_ttl_seconds=cls._read_number(
                "REPORT_CACHE_TTL_SECONDS",
                DEFAULT_CACHE_TTL_SECONDS,
                float,
                logger=logger,
            ),
            cache_max_size=cls._read_number(
                "REPORT_CACHE_MAX_SIZE",
                DEFAULT_CACHE_MAX_SIZE,
                int,
                logger=logger,
                minimum=1,
            ),
        )

    @staticmethod
    def _read_number(name: str, default, parse, logger, minimum=0):
        """Parse a numeric environment variable.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            parse: ``float`` or ``int``.
            logger: Logger used for warnings.
            minimum: Smallest accepted value.

        Returns:
            The parsed value or ``default``.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = parse(raw.strip())
        except ValueError:
            logger.warning(
                f"Invalid value for {name}: {raw!r}. Using default {default}."
            )
            return default
        if not math.isfinite(value):
            logger.warning(
                f"Non-finite value for {name}: {raw!r}. "
                f"Using default {default}."
            )
            return default
        if value < minimum:
            logger.warning(
                f"Value for {name} below {minimum}: {raw!r}. "
                f"Using default {default}."
            )
            return default
        return value


__all__ = ["ProjectionSettings"]
