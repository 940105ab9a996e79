"""
Shared fixtures for the account ledger tests
"""

import pytest

from account_ledger.sources import InputSource


class ScriptedInputSource(InputSource):
    """Answers prompts from a fixed list and records what was asked"""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    async def ask(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("No more scripted answers")
        return self.answers.pop(0)


@pytest.fixture
def scripted():
    """Factory for scripted input sources"""
    return ScriptedInputSource
