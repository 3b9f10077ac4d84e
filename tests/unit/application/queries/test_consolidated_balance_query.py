"""Unit tests for ConsolidatedBalanceQuery."""

from unittest.mock import AsyncMock

import pytest

from finlink.application.queries import ConsolidatedBalanceQuery
from finlink.domain.banking.value_objects import AccountVisibilityPolicy


class TestConsolidatedBalanceQuery:
    """Tests for balance consolidation."""

    @pytest.fixture
    def account_repo(self):
        return AsyncMock()

    @pytest.mark.asyncio
    async def test_two_usd_accounts(self, account_repo, make_account):
        account_repo.find_by_currency.return_value = [
            make_account(available=10000, current=10500, name="Checking", mask="1111"),
            make_account(available=2500, current=2500, name="Savings", mask=None),
        ]

        result = await ConsolidatedBalanceQuery(account_repo).execute("USD")

        assert result.total_available == 12500
        assert result.total_current == 13000
        assert result.account_count == 2
        assert result.currency == "USD"
        assert {a.name for a in result.accounts} == {"Checking", "Savings"}

    @pytest.mark.asyncio
    async def test_defaults_to_usd(self, account_repo):
        account_repo.find_by_currency.return_value = []

        result = await ConsolidatedBalanceQuery(account_repo).execute()

        assert result.currency == "USD"
        assert result.account_count == 0
        assert result.total_available == 0
        assert result.accounts == []
        currency, _ = account_repo.find_by_currency.call_args.args
        assert currency == "USD"

    @pytest.mark.asyncio
    async def test_currency_is_normalised(self, account_repo):
        account_repo.find_by_currency.return_value = []

        result = await ConsolidatedBalanceQuery(account_repo).execute(" eur ")

        assert result.currency == "EUR"
        currency, _ = account_repo.find_by_currency.call_args.args
        assert currency == "EUR"

    @pytest.mark.asyncio
    async def test_configured_default_currency(self, account_repo):
        account_repo.find_by_currency.return_value = []
        query = ConsolidatedBalanceQuery(account_repo, default_currency="CAD")

        result = await query.execute("")

        assert result.currency == "CAD"

    @pytest.mark.asyncio
    async def test_consolidation_policy_requires_active_connection(self, account_repo):
        account_repo.find_by_currency.return_value = []

        await ConsolidatedBalanceQuery(account_repo).execute("USD")

        _, policy = account_repo.find_by_currency.call_args.args
        assert policy == AccountVisibilityPolicy(
            exclude_deleted_connections=True,
            require_active_connection=True,
        )
