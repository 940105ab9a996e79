"""
Tests for the interactive menu loop
"""

import pytest
from decimal import Decimal

from account_ledger.storage import InMemoryBalanceStore
from account_ledger.sources import CallbackInputSource
from account_ledger.operations import AccountOperations, CREDIT_PROMPT, DEBIT_PROMPT
from account_ledger.menu import (
    MenuLoop, MenuChoice, MENU_LINES, CHOICE_PROMPT,
    INVALID_CHOICE_MESSAGE, EXIT_MESSAGE, EXIT_SUCCESS
)


class TestMenuLoop:
    """Test menu dispatch and loop termination"""

    def setup_method(self):
        self.store = InMemoryBalanceStore()
        self.reports = []
        self.output = []
        self.operations = AccountOperations(self.store, reporter=self.reports.append)

    def make_menu(self, source):
        return MenuLoop(self.operations, source, output=self.output.append)

    @pytest.mark.asyncio
    async def test_exit_choice(self, scripted):
        source = scripted(['4'])

        status = await self.make_menu(source).run()

        assert status == EXIT_SUCCESS
        assert source.prompts == [CHOICE_PROMPT]
        assert self.output == list(MENU_LINES) + [f"\n{EXIT_MESSAGE}"]

    @pytest.mark.asyncio
    async def test_view_balance(self, scripted):
        await self.make_menu(scripted(['1', '4'])).run()

        assert self.reports == ["Current balance: $1000.00"]

    @pytest.mark.asyncio
    async def test_invalid_choice_redisplays_menu(self, scripted):
        source = scripted(['7', 'x', '', '4'])

        status = await self.make_menu(source).run()

        assert status == EXIT_SUCCESS
        assert self.output.count(f"\n{INVALID_CHOICE_MESSAGE}\n") == 3
        assert self.output.count(MENU_LINES[1]) == 4
        assert self.store.read() == Decimal('1000.00')

    @pytest.mark.asyncio
    async def test_choice_whitespace_is_ignored(self, scripted):
        await self.make_menu(scripted([' 1 ', '4\n'])).run()

        assert self.reports == ["Current balance: $1000.00"]

    @pytest.mark.asyncio
    async def test_credit_prompts_through_same_source(self, scripted):
        source = scripted(['2', '500.00', '4'])

        await self.make_menu(source).run()

        assert source.prompts == [CHOICE_PROMPT, CREDIT_PROMPT, CHOICE_PROMPT]
        assert self.store.read() == Decimal('1500.00')

    @pytest.mark.asyncio
    async def test_debit_denial_keeps_loop_running(self, scripted):
        source = scripted(['3', '2000.00', '1', '4'])

        status = await self.make_menu(source).run()

        assert status == EXIT_SUCCESS
        assert source.prompts[1] == DEBIT_PROMPT
        assert self.reports == [
            "Insufficient funds for this debit.",
            "Current balance: $1000.00",
        ]

    @pytest.mark.asyncio
    async def test_multiple_operations_persist_balance(self, scripted):
        source = scripted(['2', '200.00', '3', '50.00', '1', '4'])

        await self.make_menu(source).run()

        assert self.store.read() == Decimal('1150.00')
        assert self.reports == [
            "Amount credited. New balance: $1200.00",
            "Amount debited. New balance: $1150.00",
            "Current balance: $1150.00",
        ]

    @pytest.mark.asyncio
    async def test_end_of_input_exits_cleanly(self, scripted):
        status = await self.make_menu(scripted(['1'])).run()

        assert status == EXIT_SUCCESS
        assert self.output[-1] == f"\n{EXIT_MESSAGE}"

    @pytest.mark.asyncio
    async def test_end_of_input_during_amount_prompt(self, scripted):
        status = await self.make_menu(scripted(['2'])).run()

        assert status == EXIT_SUCCESS
        assert self.store.read() == Decimal('1000.00')

    @pytest.mark.asyncio
    async def test_handle_choice_return_values(self):
        menu = self.make_menu(None)

        assert await menu.handle_choice('1') is True
        assert await menu.handle_choice('9') is True
        assert await menu.handle_choice(MenuChoice.EXIT.value) is False

    @pytest.mark.asyncio
    async def test_non_string_choice_treated_as_invalid(self):
        answers = iter([None, 4, '4'])
        menu = self.make_menu(CallbackInputSource(lambda prompt: next(answers)))

        status = await menu.run()

        assert status == EXIT_SUCCESS
        assert self.output.count(f"\n{INVALID_CHOICE_MESSAGE}\n") == 2
