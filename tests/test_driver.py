"""Tests for the quarter-circle comparison driver."""

import io
import logging
import math

import pytest

from mc_importance import CrudeMonteCarlo, ImportanceSampler
from mc_importance.driver import (
    EXACT_VALUE,
    ComparisonRow,
    build_integrators,
    compare,
    main,
    proposal_inverse_cdf,
    proposal_pdf,
    render_table,
    target,
)


class TestDriverFunctions:
    """Test the target and proposal pair."""

    def test_target_endpoints(self):
        assert target(0.0) == 4.0
        assert target(1.0) == 0.0

    def test_exact_value(self):
        assert EXACT_VALUE == math.pi

    @pytest.mark.parametrize("u", [0.0, 0.1, 0.5, 0.75, 0.999])
    def test_inverse_cdf_inverts_cdf(self, u):
        """G(G^-1(u)) == u for G(x) = 1 - (1 - x)^2."""
        x = proposal_inverse_cdf(u)
        assert 1 - (1 - x) ** 2 == pytest.approx(u)

    def test_proposal_pdf_normalized(self):
        """Midpoint rule integral of 2(1 - x) over [0, 1] is 1."""
        n = 1000
        total = sum(proposal_pdf((i + 0.5) / n) for i in range(n)) / n
        assert total == pytest.approx(1.0)


class TestRenderTable:
    """Test the fixed-width comparison table."""

    def test_layout(self):
        rows = [
            ComparisonRow("Crude", 3.14159, 0.0001),
            ComparisonRow("Importance", 3.1, 0.0415927),
        ]
        expected = (
            "Method         |Estimate            |Error\n"
            "=====================================================\n"
            "Crude          |3.14159             |0.0001\n"
            "Importance     |3.1                 |0.0415927\n"
        )
        assert render_table(rows) == expected

    def test_six_significant_digits(self):
        table = render_table([ComparisonRow("Crude", math.pi, 1.23456789e-5)])
        assert "|3.14159             |1.23457e-05\n" in table

    def test_non_finite_values_shown_as_is(self):
        table = render_table([ComparisonRow("Importance", math.inf, math.nan)])
        assert table.splitlines()[2] == "Importance     |inf                 |nan"

    def test_rule_width(self):
        assert render_table([]).splitlines()[1] == "=" * 53


class TestCompare:
    """Test running strategies side by side."""

    def test_rows(self):
        rows = compare([CrudeMonteCarlo(seed=1)], lambda x: 2.0, 100, 1.5)
        assert rows == [ComparisonRow("Crude", 2.0, 0.5)]

    def test_non_finite_estimate_warns(self, caplog):
        sampler = ImportanceSampler.from_functions(lambda x: 0.0, lambda: 0.5)
        with caplog.at_level(logging.WARNING, logger="mc_importance.driver"):
            rows = compare([sampler], lambda x: 1.0, 10, 1.0)
        assert math.isinf(rows[0].estimate)
        assert math.isinf(rows[0].error)
        assert "non-finite" in caplog.text

    def test_build_integrators(self):
        crude, importance = build_integrators(seed=0)
        assert isinstance(crude, CrudeMonteCarlo)
        assert isinstance(importance, ImportanceSampler)
        assert importance.proposal.name == "linear"


class TestMain:
    """End-to-end runs of the driver."""

    def test_estimates_close_to_pi(self):
        """n=10,000: both estimates within 0.05 of pi."""
        stream = io.StringIO()
        rows = main(n_samples=10_000, seed=2024, stream=stream)

        assert [row.method for row in rows] == ["Crude", "Importance"]
        for row in rows:
            assert abs(row.estimate - 3.14159265) < 0.05
            assert row.error == abs(row.estimate - math.pi)

    def test_output_format(self):
        stream = io.StringIO()
        main(n_samples=1000, seed=1, stream=stream)
        output = stream.getvalue()

        assert output.startswith("\n\n")
        lines = output.splitlines()
        assert lines[2] == "Method         |Estimate            |Error"
        assert lines[3] == "=" * 53
        assert lines[4].startswith("Crude          |")
        assert lines[5].startswith("Importance     |")
        assert len(lines) == 6

    def test_seeded_runs_repeat(self):
        first, second = io.StringIO(), io.StringIO()
        main(n_samples=1000, seed=99, stream=first)
        main(n_samples=1000, seed=99, stream=second)
        assert first.getvalue() == second.getvalue()

    def test_defaults_to_stdout(self, capsys):
        main(n_samples=100)
        captured = capsys.readouterr()
        assert "Method         |Estimate" in captured.out
        assert captured.err == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
