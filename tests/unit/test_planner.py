"""Unit tests for AllocationPlanner."""

import pytest

from vault_allocator.core.catalog import default_catalog
from vault_allocator.core.models import RiskTier
from vault_allocator.engine.planner import AllocationPlanner

from tests.factories import make_vault


class TestAllocationPlanner:
    """Tests for the greedy diversified planner."""

    @pytest.fixture
    def planner(self):
        return AllocationPlanner()

    def test_three_vault_scenario(self, planner, scenario_vaults):
        """Top APY, then Low, then Medium at 50/30/20."""
        records = planner.plan(scenario_vaults, 1000, 3)

        assert [r.vault.name for r in records] == ["A", "B", "C"]
        assert [r.percentage for r in records] == [50, 30, 20]
        assert [r.amount for r in records] == pytest.approx([500, 300, 200])
        assert [r.expected_yield for r in records] == pytest.approx([60, 30, 16])

    def test_four_vault_scenario_overallocates(self, planner, scenario_vaults):
        """A fourth vault gets another 20% and the total reaches 120%."""
        vaults = scenario_vaults + [make_vault("D", 7.0, RiskTier.HIGH)]

        records = planner.plan(vaults, 1000, 4)

        assert [r.vault.name for r in records] == ["A", "B", "C", "D"]
        assert [r.percentage for r in records] == [50, 30, 20, 20]
        assert sum(r.percentage for r in records) == 120
        assert records[3].amount == pytest.approx(200)

    def test_empty_candidates(self, planner):
        assert planner.plan([], 1000, 3) == []

    def test_zero_vaults_requested(self, planner, scenario_vaults):
        assert planner.plan(scenario_vaults, 1000, 0) == []

    def test_first_record_is_highest_apy(self, planner, mixed_vaults):
        records = planner.plan(mixed_vaults, 100, 3)
        assert records[0].vault.apy == max(v.apy for v in mixed_vaults)

    def test_low_vault_second_when_available(self, planner, mixed_vaults):
        records = planner.plan(mixed_vaults, 100, 3)

        assert records[1].vault.name == "Safe Two"
        assert records[2].vault.name == "Mid Two"

    def test_fill_by_apy_after_diversification(self, planner, mixed_vaults):
        records = planner.plan(mixed_vaults, 100, 5)

        names = [r.vault.name for r in records]
        assert names == ["Wild One", "Safe Two", "Mid Two", "Wild Two", "Mid One"]

    def test_missing_tiers_fall_through_to_apy(self, planner):
        vaults = [
            make_vault("H1", 20.0, RiskTier.HIGH),
            make_vault("H2", 18.0, RiskTier.HIGH),
            make_vault("H3", 16.0, RiskTier.HIGH),
        ]

        records = planner.plan(vaults, 100, 3)

        assert [r.vault.name for r in records] == ["H1", "H2", "H3"]

    def test_selection_capped_at_num_vaults(self, planner, mixed_vaults):
        """The Low and Medium picks never push the count past the target."""
        records = planner.plan(mixed_vaults, 100, 1)

        assert len(records) == 1
        assert records[0].vault.name == "Wild One"

    def test_count_is_min_of_target_and_candidates(self, planner, scenario_vaults):
        assert len(planner.plan(scenario_vaults, 100, 10)) == 3
        assert len(planner.plan(scenario_vaults, 100, 2)) == 2

    def test_equal_looking_vaults_are_distinct(self, planner):
        twin_a = make_vault("Twin", 10.0, RiskTier.LOW)
        twin_b = make_vault("Twin", 10.0, RiskTier.LOW)

        records = planner.plan([twin_a, twin_b], 100, 3)

        assert len(records) == 2
        assert records[0].vault is twin_a
        assert records[1].vault is twin_b

    def test_ties_keep_input_order(self, planner):
        first = make_vault("First", 10.0, RiskTier.HIGH)
        second = make_vault("Second", 10.0, RiskTier.HIGH)

        records = planner.plan([first, second], 100, 2)

        assert records[0].vault is first

    def test_input_not_mutated(self, planner, mixed_vaults):
        before = list(mixed_vaults)
        planner.plan(mixed_vaults, 100, 4)
        assert mixed_vaults == before

    def test_percentage_recovers_from_amount(self, planner, mixed_vaults):
        total = 2500.0
        for record in planner.plan(mixed_vaults, total, 5):
            assert record.amount / total * 100 == pytest.approx(record.percentage)

    def test_negative_amount_passes_through(self, planner, scenario_vaults):
        records = planner.plan(scenario_vaults, -100, 3)
        assert records[0].amount == pytest.approx(-50)

    def test_normalize_rescales_to_100(self, scenario_vaults):
        planner = AllocationPlanner(normalize=True)
        vaults = scenario_vaults + [make_vault("D", 7.0, RiskTier.HIGH)]

        records = planner.plan(vaults, 1200, 4)

        assert sum(r.percentage for r in records) == pytest.approx(100)
        assert sum(r.amount for r in records) == pytest.approx(1200)
        assert records[0].percentage == pytest.approx(50 * 100 / 120)

    def test_normalize_leaves_three_vault_schedule(self, scenario_vaults):
        planner = AllocationPlanner(normalize=True)
        records = planner.plan(scenario_vaults, 1000, 3)
        assert [r.percentage for r in records] == pytest.approx([50, 30, 20])

    def test_percentages_schedule(self, planner):
        assert planner.percentages(0) == []
        assert planner.percentages(1) == [50]
        assert planner.percentages(5) == [50, 30, 20, 20, 20]
        assert all(isinstance(p, int) for p in planner.percentages(5))

    def test_normalized_percentages_are_floats(self):
        weights = AllocationPlanner(normalize=True).percentages(4)
        assert all(isinstance(p, float) for p in weights)

    def test_plan_for_risk_filters_tier(self, planner, mixed_vaults):
        records = planner.plan_for_risk(mixed_vaults, RiskTier.MEDIUM, 100, 3)

        assert [r.vault.name for r in records] == ["Mid Two", "Mid One"]
        assert all(r.vault.risk == RiskTier.MEDIUM for r in records)

    def test_plan_for_risk_empty_tier(self, planner, scenario_vaults):
        vaults = [v for v in scenario_vaults if v.risk != RiskTier.LOW]
        assert planner.plan_for_risk(vaults, RiskTier.LOW, 100, 3) == []

    def test_catalog_medium_plan(self, planner):
        """Balanced plan over the built-in catalog."""
        records = planner.plan_for_risk(default_catalog(), RiskTier.MEDIUM, 1000, 3)

        assert [r.vault.symbol for r in records] == ["pythUSDC", "smUSDC", "ionicUSDC"]
        assert records[0].expected_yield == pytest.approx(500 * 12.79 / 100)

    def test_low_tier_picked_ahead_of_higher_medium(self, planner):
        """A(10 High), B(8 Low), C(9 Medium): the Low vault comes second."""
        vaults = [
            make_vault("A", 10.0, RiskTier.HIGH),
            make_vault("B", 8.0, RiskTier.LOW),
            make_vault("C", 9.0, RiskTier.MEDIUM),
        ]

        records = planner.plan(vaults, 100, 3)

        assert [
            (r.vault.name, r.percentage, r.amount, r.expected_yield) for r in records
        ] == [
            ("A", 50, pytest.approx(50), pytest.approx(5.0)),
            ("B", 30, pytest.approx(30), pytest.approx(2.4)),
            ("C", 20, pytest.approx(20), pytest.approx(1.8)),
        ]
        assert len(planner.plan(vaults, 100, 4)) == 3
