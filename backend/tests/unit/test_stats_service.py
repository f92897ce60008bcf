"""Unit tests for dashboard statistics over the demo data."""

from pathlib import Path

import pytest

from bookkeeper.config import Settings


@pytest.fixture
def seeded(services):
    services.seed.initialize(Path(Settings().seed_file))
    return services


def test_dashboard_stats(seeded):
    stats = seeded.stats.dashboard_stats("user_demo")

    assert stats.total_invoices == 8
    assert stats.total_revenue == pytest.approx(34500 + 17250 + 138000)
    assert stats.outstanding == pytest.approx(29325 + 55200 + 77050 + 11500)
    assert stats.overdue_count == 1
    assert stats.active_clients == 4


def test_client_stats(seeded):
    stats = seeded.stats.client_stats("user_demo", "client_1")
    assert stats.invoice_count == 2
    assert stats.total_revenue == pytest.approx(34500)


def test_stats_for_unknown_user_are_zero(services):
    stats = services.stats.dashboard_stats("nobody")
    assert stats.total_invoices == 0
    assert stats.total_revenue == 0
    assert stats.active_clients == 0
