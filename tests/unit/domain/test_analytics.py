"""Tests for portfolio_tracker/domain/services/analytics.py."""

import logging
from decimal import Decimal
from itertools import count

import pytest

from portfolio_tracker.domain.exceptions import EmptyPortfolioError, NotFoundError
from portfolio_tracker.domain.models.holdings import Holding, HoldingView, PortfolioSummary
from portfolio_tracker.domain.services.analytics import AnalyticsService

D = Decimal
_ids = count(1)


def _holding(name, qty, purchase, current, holding_id=None):
    return Holding(
        holding_id=holding_id if holding_id is not None else next(_ids),
        name=name,
        quantity=D(qty),
        purchase_price=D(purchase),
        current_price=D(current),
    )


def _apple():
    return _holding("Apple", "10", "100", "150")


def _tesla():
    return _holding("Tesla", "5", "200", "100")


def _bitcoin():
    return _holding("Bitcoin", "1", "40000", "30000")


@pytest.fixture
def svc() -> AnalyticsService:
    return AnalyticsService()


# --- enrich ---

def test_enrich_scenario_a(svc):
    view = svc.enrich(_apple(), D("1500.0000"))
    assert view.current_value == D("1500.0000")
    assert view.invested_value == D("1000.0000")
    assert view.roi == D("50.0000")


def test_enrich_returns_holding_view(svc):
    assert isinstance(svc.enrich(_apple(), D("1500")), HoldingView)


def test_enrich_copies_holding_fields(svc):
    holding = _apple()
    view = svc.enrich(holding, D("1500"))
    assert view.holding_id == holding.holding_id
    assert view.name == "Apple"
    assert view.created_at == holding.created_at


def test_enrich_against_zero_total_has_zero_share(svc):
    assert svc.enrich(_apple(), D("0")).portfolio_share == D("0")


def test_enrich_tolerates_zero_purchase_price(svc):
    view = svc.enrich(_holding("Gift", "2", "0", "10"), D("20"))
    assert view.roi == D("0")
    assert view.invested_value == D("0")


# --- enrich_all ---

def test_enrich_all_scenario_c_single_holding_share_is_hundred(svc):
    views = svc.enrich_all([_apple()])
    assert len(views) == 1
    assert views[0].portfolio_share == D("100.0000")


def test_enrich_all_empty_returns_empty(svc):
    assert svc.enrich_all([]) == []


def test_enrich_all_preserves_order(svc):
    views = svc.enrich_all([_tesla(), _apple(), _bitcoin()])
    assert [v.name for v in views] == ["Tesla", "Apple", "Bitcoin"]


def test_enrich_all_shares(svc):
    views = svc.enrich_all([_apple(), _tesla()])
    assert views[0].portfolio_share == D("75.0000")
    assert views[1].portfolio_share == D("25.0000")


@pytest.mark.parametrize(
    "holdings",
    [
        [("A", "1", "1", "1"), ("B", "1", "1", "1"), ("C", "1", "1", "1")],
        [("A", "3", "10", "7.77"), ("B", "0.5", "40000", "31234.5"), ("C", "13", "1", "2")],
        [("A", "1", "1", "1"), ("B", "1", "1", "2"), ("C", "1", "1", "4"), ("D", "1", "1", "8")],
    ],
)
def test_enrich_all_shares_sum_to_hundred(svc, holdings):
    views = svc.enrich_all([_holding(*h) for h in holdings])
    share_sum = sum(v.portfolio_share for v in views)
    # Each share is rounded independently: at most half a unit of error each.
    assert abs(share_sum - D("100")) <= D("0.0001") * len(views)


def test_enrich_all_totals_consistent_with_summary(svc):
    holdings = [_apple(), _tesla(), _bitcoin()]
    views = svc.enrich_all(holdings)
    summary = svc.summarize(holdings)
    assert summary.total_current_value == sum(v.current_value for v in views)
    assert summary.total_invested_value == sum(v.invested_value for v in views)


# --- totals ---

def test_total_current_value_empty_is_zero(svc):
    assert svc.total_current_value([]) == D("0")


def test_total_invested_value(svc):
    assert svc.total_invested_value([_apple(), _bitcoin()]) == D("41000.0000")


# --- summarize ---

def test_summarize_scenario_b(svc):
    summary = svc.summarize([_apple(), _tesla()])
    assert summary.total_current_value == D("2000.0000")
    assert summary.total_invested_value == D("2000.0000")
    assert summary.total_profit == D("0.0000")
    assert summary.average_roi == D("0.0000")
    assert summary.largest_asset_name == "Apple"


def test_summarize_scenario_d(svc):
    summary = svc.summarize([_apple(), _bitcoin()])
    assert summary.total_current_value == D("31500.0000")
    assert summary.total_profit == D("-9500.0000")
    assert summary.largest_asset_name == "Bitcoin"


def test_summarize_average_roi_is_unweighted(svc):
    # Apple +50%, Bitcoin -25%: mean 12.5 although Bitcoin is 20x larger.
    assert svc.summarize([_apple(), _bitcoin()]).average_roi == D("12.5000")


def test_summarize_totals_have_four_decimal_places(svc):
    summary = svc.summarize([_apple()])
    assert summary.total_current_value.as_tuple().exponent == -4
    assert summary.total_profit.as_tuple().exponent == -4


def test_summarize_holding_count(svc):
    assert svc.summarize([_apple(), _tesla(), _bitcoin()]).holding_count == 3


def test_summarize_empty_is_zero_valued(svc):
    summary = svc.summarize([])
    assert summary.total_current_value == D("0")
    assert summary.total_invested_value == D("0")
    assert summary.total_profit == D("0")
    assert summary.average_roi == D("0")
    assert summary.largest_asset_name is None
    assert summary.holding_count == 0


def test_summarize_empty_returns_summary(svc):
    assert isinstance(svc.summarize([]), PortfolioSummary)


def test_summarize_largest_tie_picks_first_occurrence(svc):
    first = _holding("First", "10", "1", "10")
    second = _holding("Second", "5", "1", "20")
    assert svc.summarize([first, second]).largest_asset_name == "First"
    assert svc.summarize([second, first]).largest_asset_name == "Second"


def test_summarize_includes_zero_purchase_price_as_zero_roi(svc):
    summary = svc.summarize([_apple(), _holding("Gift", "1", "0", "10")])
    assert summary.average_roi == D("25.0000")


def test_summarize_does_not_mutate_input(svc):
    holdings = [_bitcoin(), _apple()]
    svc.summarize(holdings)
    assert [h.name for h in holdings] == ["Bitcoin", "Apple"]


def test_summarize_logs_at_debug(svc, caplog):
    with caplog.at_level(logging.DEBUG, logger="portfolio_tracker.domain.services.analytics"):
        svc.summarize([_apple()])
    assert "Summarized 1 holdings" in caplog.text


# --- top_by_roi ---

def test_top_by_roi_scenario_d_returns_apple(svc):
    top = svc.top_by_roi([_apple(), _bitcoin()])
    assert top.name == "Apple"
    assert top.roi == D("50.0000")


def test_top_by_roi_share_against_whole_collection(svc):
    top = svc.top_by_roi([_apple(), _bitcoin()])
    # 1500 / 31500 * 100
    assert top.portfolio_share == D("4.7619")


def test_top_by_roi_roi_not_less_than_any_other(svc):
    holdings = [_tesla(), _bitcoin(), _apple(), _holding("Flat", "1", "5", "5")]
    top = svc.top_by_roi(holdings)
    assert all(top.roi >= v.roi for v in svc.enrich_all(holdings))


def test_top_by_roi_tie_picks_first_occurrence(svc):
    first = _holding("First", "1", "100", "150")
    second = _holding("Second", "2", "10", "15")
    assert svc.top_by_roi([first, second]).name == "First"
    assert svc.top_by_roi([second, first]).name == "Second"


def test_top_by_roi_empty_raises_not_found(svc):
    with pytest.raises(EmptyPortfolioError):
        svc.top_by_roi([])


def test_top_by_roi_empty_error_is_not_found_condition(svc):
    with pytest.raises(NotFoundError):
        svc.top_by_roi([])
