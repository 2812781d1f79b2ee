"""Use case serving report computations through the computation cache."""

from src.application.ports.computation_cache import ComputationCachePort
from src.domain.models.reports import (
    AssetTypeDistribution,
    GrowthOutlook,
    GrowthProjection,
    LiquidityBucket,
    ReportInput,
    StressTestResult,
)
from src.domain.services.reports import (
    compute_asset_type_distribution,
    compute_growth_projections,
    compute_liquidity_analysis,
    compute_stress_test_results,
)


class ComputeReportsUseCase:
    """Compute distribution, liquidity, stress and growth reports.

    Each report is memoized by kind and input; unchanged holdings within the
    cache TTL are served without recomputation.
    """

    def __init__(self, cache: ComputationCachePort) -> None:
        self._cache = cache

    def asset_type_distribution(
        self,
        report_input: ReportInput,
    ) -> AssetTypeDistribution:
        return self._cache.get_or_compute(
            "asset_type_distribution",
            report_input.to_payload(),
            lambda: compute_asset_type_distribution(report_input),
        )

    def liquidity_analysis(
        self,
        report_input: ReportInput,
    ) -> tuple[LiquidityBucket, ...]:
        return self._cache.get_or_compute(
            "liquidity_analysis",
            report_input.to_payload(),
            lambda: compute_liquidity_analysis(report_input),
        )

    def stress_test_results(
        self,
        report_input: ReportInput,
    ) -> tuple[StressTestResult, ...]:
        return self._cache.get_or_compute(
            "stress_test_results",
            report_input.to_payload(),
            lambda: compute_stress_test_results(report_input),
        )

    def growth_projections(
        self,
        report_input: ReportInput,
        outlook: GrowthOutlook = GrowthOutlook.REALISTIC,
    ) -> tuple[GrowthProjection, ...]:
        """Return growth projections for one outlook.

        The outlook is part of both the cache kind and the hashed payload.
        """
        payload = report_input.to_payload()
        payload["scenario"] = outlook.value
        return self._cache.get_or_compute(
            f"projection_{outlook.value}",
            payload,
            lambda: compute_growth_projections(report_input, outlook),
        )

    def invalidate(self, kind: str) -> int:
        """Drop cached results of one report kind."""
        return self._cache.invalidate_by_pattern(kind)


__all__ = ["ComputeReportsUseCase"]
